# LZ_Pair.py

from lz_config import DISTANCE_BITS, LENGTH_BITS, MAX_MATCH_LENGTH, MAX_WINDOW_SIZE


class LZPair:
    """
    Back reference token (dist, length):
    - dist: offset back from the current position (1..4095, 0 only in corrupt streams)
    - length: number of bytes to copy (0..15 on the wire)
    Packs into 12 bits of distance followed by 4 bits of length.
    """

    def __init__(self, dist: int, length: int):
        """
        :param dist: distance back into the window (>=1)
        :param length: match length (fits in 4 bits)
        """
        if not 0 <= dist <= MAX_WINDOW_SIZE:
            raise ValueError(f"Distance {dist} does not fit in {DISTANCE_BITS} bits")
        if not 0 <= length <= MAX_MATCH_LENGTH:
            raise ValueError(f"Length {length} does not fit in {LENGTH_BITS} bits")
        self.dist = dist
        self.length = length

    def pack(self) -> bytes:
        """
        Returns the two wire bytes: the top 8 bits of the distance, then
        the low 4 bits of the distance followed by the length.
        """
        return bytes([self.dist >> 4, ((self.dist & 0x0F) << 4) | self.length])

    @classmethod
    def unpack(cls, byte1: int, byte2: int) -> "LZPair":
        return cls((byte1 << 4) | (byte2 >> 4), byte2 & 0x0F)

    def __eq__(self, other):
        if not isinstance(other, LZPair):
            return NotImplemented
        return self.dist == other.dist and self.length == other.length

    def __hash__(self):
        return hash((self.dist, self.length))

    def __repr__(self):
        return f"<LZPair dist={self.dist} len={self.length}>"


class LZLiteral:
    """
    Literal token: a single byte emitted as-is.
    """

    def __init__(self, value: int):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Literal {value} is not a byte value")
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, LZLiteral):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"<LZLiteral {self.value:#04x}>"


if __name__ == "__main__":
    # Print a few packed references
    print("Dist\tLen\tByte1\tByte2")
    for dist, length in [(1, 2), (15, 15), (16, 3), (255, 7), (4095, 15)]:
        byte1, byte2 = LZPair(dist, length).pack()
        print(f"{dist}\t{length}\t{byte1:08b}\t{byte2:08b}")
