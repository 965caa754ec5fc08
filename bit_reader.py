from typing import BinaryIO, Optional

from bitarray import bitarray
from bitarray.util import ba2int

from lz_errors import TruncatedTokenError


class BitReader:
    """
    A class for reading bits from an in-memory bit stream, most significant
    bit first within each byte.
    """

    def __init__(self, data: bytes = b"") -> None:
        """
        Initialize BitReader over a byte string.

        Args:
            data: The encoded bytes
        """
        self.bits = bitarray(endian="big")
        self.bits.frombytes(bytes(data))
        self.pos = 0

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "BitReader":
        """
        Read an entire binary stream into a new reader.
        """
        return cls(stream.read())

    @classmethod
    def from_file(cls, filename: str) -> "BitReader":
        with open(filename, "rb") as f:
            return cls.from_stream(f)

    def remaining(self) -> int:
        """
        Number of bits not yet read.
        """
        return len(self.bits) - self.pos

    def only_padding_left(self) -> bool:
        """
        True when what is left is at most the zero padding of the last byte.
        """
        left = self.remaining()
        return left < 8 and not self.bits[self.pos:].any()

    def read_bit(self) -> Optional[int]:
        """
        Read one bit from the stream.

        Returns:
            The bit value (0 or 1), or None once the stream is exhausted
        """
        if self.pos >= len(self.bits):
            return None
        val = self.bits[self.pos]
        self.pos += 1
        return val

    def read_bits_msb(self, n: int) -> int:
        """
        Read n bits in MSB-first order and return them as an integer.

        Args:
            n: Number of bits to read

        Returns:
            The value as an integer

        Raises:
            TruncatedTokenError: If fewer than n bits are left
        """
        if n == 0:
            return 0
        if self.pos + n > len(self.bits):
            raise TruncatedTokenError(
                f"Stream ended after {self.remaining()} of {n} bits"
            )
        val = ba2int(self.bits[self.pos : self.pos + n])
        self.pos += n
        return val

    def read_byte(self) -> int:
        return self.read_bits_msb(8)
