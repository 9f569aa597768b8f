import logging

from cryptography.hazmat.primitives.ciphers import BlockCipherAlgorithm

from RC5 import RC5

logger = logging.getLogger(__name__)


class RC5Algorithm(BlockCipherAlgorithm):
    """
    RC5 bound to a single key.

    The round subkeys are expanded once here and reused by every
    encrypt_block/decrypt_block call. The table is an immutable tuple, so one
    instance can be shared between threads. A different key needs a new
    instance.
    """

    def __init__(self, key: bytes, w=32, r=12):
        """
        key: encryption key, any length
        w: word size in bits
        r: number of rounds
        """
        self.cipher = RC5(w=w, r=r, b=len(key))
        self.key = bytes(key)
        self.S = self.cipher.key_expansion(self.key)
        logger.debug("Key schedule ready for %s (%d subkeys)", self.cipher.name, len(self.S))

    @property
    def name(self) -> str:
        return self.cipher.name

    @property
    def key_sizes(self) -> frozenset[int]:
        return frozenset([8 * self.cipher.b])

    @property
    def key_size(self) -> int:
        return 8 * len(self.key)

    @property
    def block_size(self) -> int:
        return 8 * self.cipher.block_size

    def __repr__(self):
        return f"RC5Algorithm(w={self.cipher.w}, r={self.cipher.r}, b={self.cipher.b})"

    def encrypt_block(self, plaintext: bytes) -> bytes:
        return self.cipher.encrypt_with(self.S, plaintext)

    def decrypt_block(self, ciphertext: bytes) -> bytes:
        return self.cipher.decrypt_with(self.S, ciphertext)
