from typing import BinaryIO

from bitarray import bitarray
from bitarray.util import int2ba


class BitWriter:
    """
    A simple bit writer on top of a bitarray, most significant bit first,
    with zero padding up to a whole byte on output.
    """

    def __init__(self) -> None:
        self.bits = bitarray(endian="big")  # big endian keeps tobytes() MSB first

    def __len__(self) -> int:
        return len(self.bits)

    def write_bit(self, bit: int) -> None:
        """
        Write a single bit (any truthy value is written as 1).
        """
        self.bits.append(1 if bit else 0)

    def write_bits_msb(self, value: int, length: int) -> None:
        """
        Write `length` bits of `value`, most significant bit first.

        Args:
            value: Non-negative integer that fits in `length` bits
            length: Number of bits to write

        Raises:
            ValueError: If the length is negative or the value does not fit
        """
        if length < 0:
            raise ValueError("Length cannot be negative")
        if length == 0:
            return
        if not 0 <= value < (1 << length):
            raise ValueError(f"Value {value} does not fit in {length} bits")
        self.bits.extend(int2ba(value, length=length, endian="big"))

    def write_byte(self, value: int) -> None:
        """
        Write one 8-bit value.
        """
        self.write_bits_msb(value, 8)

    def byte_align(self) -> None:
        """
        Pad with zero bits up to the next byte boundary.
        """
        while len(self.bits) % 8 != 0:
            self.bits.append(0)

    def to_bytes(self) -> bytes:
        self.byte_align()
        return self.bits.tobytes()

    def flush_to_stream(self, stream: BinaryIO) -> int:
        """
        Pad to a byte boundary and write everything to a binary stream.

        Returns:
            Number of bytes written
        """
        data = self.to_bytes()
        stream.write(data)
        return len(data)

    def flush_to_file(self, filename: str) -> int:
        with open(filename, "wb") as f:
            return self.flush_to_stream(f)
