from RC5Errors import ConfigurationError

# magic constants P (from e) and Q (from the golden ratio), odd-rounded
MAGIC_CONSTANTS = {
    16: (0xB7E1, 0x9E37),
    32: (0xB7E15163, 0x9E3779B9),
    64: (0xB7E151628AED2A6B, 0x9E3779B97F4A7C15),
}

SUPPORTED_WIDTHS = tuple(sorted(MAGIC_CONSTANTS))


class WordDomain:
    def __init__(self, w: int):
        """
        w: word size in bits, one of 16, 32, 64
        """
        if w not in MAGIC_CONSTANTS:
            raise ConfigurationError(f"Word size must be one of {SUPPORTED_WIDTHS}, got {w!r}")

        self.w = w
        self.u = (w + 7) // 8
        self.mask = 2 ** w - 1
        self.P, self.Q = MAGIC_CONSTANTS[w]

    def __repr__(self):
        return f"WordDomain(w={self.w})"

    def add(self, x: int, y: int) -> int:
        return (x + y) & self.mask

    def sub(self, x: int, y: int) -> int:
        return (x - y) & self.mask

    def rotl(self, val: int, shift: int) -> int:
        """ Rotate val left by shift mod w bits """
        val &= self.mask
        shift &= self.w - 1
        return ((val << shift) | (val >> (self.w - shift))) & self.mask

    def rotr(self, val: int, shift: int) -> int:
        """ Rotate val right by shift mod w bits """
        val &= self.mask
        shift &= self.w - 1
        return ((val >> shift) | (val << (self.w - shift))) & self.mask

    def pack_word(self, buffer, offset: int) -> int:
        """ Read u bytes from buffer[offset:], least significant byte first """
        return int.from_bytes(buffer[offset:offset + self.u], byteorder='little')

    def unpack_word(self, buffer: bytearray, offset: int, word: int) -> None:
        """ Write word into buffer[offset:offset + u], least significant byte first """
        buffer[offset:offset + self.u] = (word & self.mask).to_bytes(self.u, byteorder='little')
