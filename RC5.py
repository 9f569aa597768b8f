from RC5Errors import ConfigurationError, SizeMismatchError
from WordDomain import WordDomain


class RC5:
    def __init__(self, w=32, r=12, b=16):
        """
        w: word size in bits (16, 32 or 64)
        r: number of rounds
        b: key length in bytes
        """
        for field, value in (('r', r), ('b', b)):
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ConfigurationError(f"{field} must be a non-negative integer, got {value!r}")

        self.words = WordDomain(w)
        self.w = w
        self.r = r
        self.b = b
        self.u = self.words.u
        self.t = 2 * (r + 1)

    @property
    def block_size(self) -> int:
        """ Block size in bytes (two words) """
        return 2 * self.u

    @property
    def name(self) -> str:
        return f"RC5-{self.w}/{self.r}/{self.b}"

    def __repr__(self):
        return f"RC5(w={self.w}, r={self.r}, b={self.b})"

    def check_key(self, key: bytes) -> bytes:
        if len(key) != self.b:
            raise SizeMismatchError(f"Key must be {self.b} bytes, got {len(key)}")
        return bytes(key)

    def check_block(self, block: bytes) -> bytes:
        if len(block) != self.block_size:
            raise SizeMismatchError(f"Block must be {self.block_size} bytes, got {len(block)}")
        return bytes(block)

    def key_expansion(self, key: bytes) -> tuple[int, ...]:
        """ Expand the key into the table S of t round subkeys """
        key = self.check_key(key)
        words = self.words
        u = self.u
        t = self.t

        # L: key packed little endian into c words, last word zero filled
        c = max(1, -(-self.b // u))
        L = [words.pack_word(key, i * u) for i in range(c)]

        S = [0] * t
        S[0] = words.P
        for i in range(1, t):
            S[i] = words.add(S[i - 1], words.Q)

        A = B = i = j = 0
        for _ in range(3 * max(t, c)):
            A = S[i] = words.rotl(S[i] + A + B, 3)
            B = L[j] = words.rotl(L[j] + A + B, A + B)
            i = (i + 1) % t
            j = (j + 1) % c

        return tuple(S)

    def encode_words(self, S: tuple[int, ...], A: int, B: int) -> tuple[int, int]:
        """ Forward round transform of the word pair (A, B) """
        words = self.words
        A = words.add(A, S[0])
        B = words.add(B, S[1])
        for i in range(1, self.r + 1):
            A = words.add(words.rotl(A ^ B, B), S[2 * i])
            # B rotates by the A computed just above
            B = words.add(words.rotl(B ^ A, A), S[2 * i + 1])
        return A, B

    def decode_words(self, S: tuple[int, ...], A: int, B: int) -> tuple[int, int]:
        """ Inverse of encode_words """
        words = self.words
        for i in range(self.r, 0, -1):
            B = words.rotr(words.sub(B, S[2 * i + 1]), A) ^ A
            A = words.rotr(words.sub(A, S[2 * i]), B) ^ B
        B = words.sub(B, S[1])
        A = words.sub(A, S[0])
        return A, B

    def encrypt_with(self, S: tuple[int, ...], plaintext: bytes) -> bytes:
        """ Encrypt one block with an already expanded table """
        return self._encrypt(S, self.check_block(plaintext))

    def decrypt_with(self, S: tuple[int, ...], ciphertext: bytes) -> bytes:
        """ Decrypt one block with an already expanded table """
        return self._decrypt(S, self.check_block(ciphertext))

    def encode(self, key: bytes, plaintext: bytes) -> bytes:
        """ Encrypt one block of 2u bytes """
        # block is checked before the key schedule is expanded
        plaintext = self.check_block(plaintext)
        return self._encrypt(self.key_expansion(key), plaintext)

    def decode(self, key: bytes, ciphertext: bytes) -> bytes:
        """ Decrypt one block of 2u bytes """
        ciphertext = self.check_block(ciphertext)
        return self._decrypt(self.key_expansion(key), ciphertext)

    def _encrypt(self, S: tuple[int, ...], plaintext: bytes) -> bytes:
        A, B = self.encode_words(S, self.words.pack_word(plaintext, 0), self.words.pack_word(plaintext, self.u))
        return self._unpack_block(A, B)

    def _decrypt(self, S: tuple[int, ...], ciphertext: bytes) -> bytes:
        A, B = self.decode_words(S, self.words.pack_word(ciphertext, 0), self.words.pack_word(ciphertext, self.u))
        return self._unpack_block(A, B)

    def _unpack_block(self, A: int, B: int) -> bytes:
        block = bytearray(self.block_size)
        self.words.unpack_word(block, 0, A)
        self.words.unpack_word(block, self.u, B)
        return bytes(block)
