"""
This module implements the LZ77 compression algorithm.
It compresses data by finding repeated sequences inside a bounded sliding
window and encoding them as back references.

Every token starts with a flag bit:
- 0 followed by 8 bits: a literal byte
- 1 followed by 12 bits of distance and 4 bits of length: a back reference
There is no header and no terminator; the last byte is padded with zeros.
"""

from typing import BinaryIO, Iterator, Optional, Union

from bit_reader import BitReader
from bit_writer import BitWriter
from compressor_ABC import Compressor
from LZ_Pair import LZLiteral, LZPair
from lz_config import DISTANCE_BITS, LENGTH_BITS, MAX_MATCH_LENGTH, MAX_WINDOW_SIZE, LZ77Config
from lz_errors import InvalidReferenceError
from lz_window import LZWindow

Token = Union[LZLiteral, LZPair]


class LZ77Encoder:
    """
    Greedy left-to-right LZ77 encoder.
    """

    def __init__(
        self, config: LZ77Config, exhaustive: bool = False, verbose: bool = False
    ) -> None:
        self.config = config
        self.exhaustive = exhaustive
        self.verbose = verbose

    def tokens(self, data) -> Iterator[Token]:
        """
        Yield one token per step until the whole input is covered.
        """
        if len(data) == 0:
            return

        window = LZWindow(data, self.config)
        find = window.find_exhaustive if self.exhaustive else window.find
        i = 0
        while i < len(data):
            match = find(i)
            if match is not None:
                if self.verbose:
                    print(
                        f"Match at position {i}: distance={match.dist}, length={match.length}"
                    )
                yield match
                i += match.length
            else:
                if self.verbose:
                    print(f"Literal at position {i}: {data[i]}")
                yield LZLiteral(data[i])
                i += 1

    @staticmethod
    def write_token(writer: BitWriter, token: Token) -> None:
        if isinstance(token, LZPair):
            writer.write_bit(1)
            for byte in token.pack():
                writer.write_byte(byte)
        else:
            writer.write_bit(0)
            writer.write_byte(token.value)

    def encode(self, data) -> bytes:
        writer = BitWriter()
        for token in self.tokens(data):
            self.write_token(writer, token)
        return writer.to_bytes()


class LZ77Decoder:
    """
    LZ77 decoder. Rebuilds the output in a growable buffer so back
    references can read bytes written by the same copy.

    Distances are checked against the configured window: a stream encoded
    with a larger window than this decoder was given is rejected with
    InvalidReferenceError instead of being replayed.
    """

    def __init__(self, config: LZ77Config, verbose: bool = False) -> None:
        self.config = config
        self.verbose = verbose

    @staticmethod
    def tokens(reader: BitReader) -> Iterator[Token]:
        """
        Yield tokens until the stream (apart from its zero padding) is used up.

        Raises:
            TruncatedTokenError: If the stream stops in the middle of a token
        """
        while not reader.only_padding_left():
            flag = reader.read_bit()
            if not flag:
                yield LZLiteral(reader.read_byte())
            else:
                dist = reader.read_bits_msb(DISTANCE_BITS)
                length = reader.read_bits_msb(LENGTH_BITS)
                yield LZPair(dist, length)

    def replay(self, token: Token, output: bytearray) -> None:
        """
        Append the bytes described by one token to the output.
        """
        if isinstance(token, LZLiteral):
            output.append(token.value)
            return

        dist = token.dist
        if dist == 0 or dist > self.config.window_size:
            raise InvalidReferenceError(
                f"Distance {dist} is outside the window of {self.config.window_size} bytes"
            )
        if dist > len(output):
            raise InvalidReferenceError(
                f"Distance {dist} points before the start of the output ({len(output)} bytes)"
            )
        # one byte at a time: the source may include bytes appended by this copy
        for _ in range(token.length):
            output.append(output[len(output) - dist])

    def decode(self, data: bytes) -> bytes:
        return self.decode_reader(BitReader(data))

    def decode_reader(self, reader: BitReader) -> bytes:
        output = bytearray()
        for token in self.tokens(reader):
            if self.verbose:
                print(f"Token at output position {len(output)}: {token!r}")
            self.replay(token, output)
        return bytes(output)


class LZ77(Compressor):
    """
    LZ77 compression algorithm implementation.
    This class provides methods to compress and decompress data using the LZ77 algorithm.
    """

    MAX_WINDOW_SIZE = MAX_WINDOW_SIZE

    def __init__(
        self,
        window_size: Optional[int] = None,
        max_match_length: int = MAX_MATCH_LENGTH,
        exhaustive: bool = False,
        verbose: bool = False,
    ) -> None:
        if window_size is None:
            window_size = self.MAX_WINDOW_SIZE
        self.config = LZ77Config(window_size, max_match_length)
        self.verbose = verbose
        self.encoder = LZ77Encoder(self.config, exhaustive=exhaustive, verbose=verbose)
        self.decoder = LZ77Decoder(self.config, verbose=verbose)

    @property
    def window_size(self) -> int:
        return self.config.window_size

    def encode(self, data) -> bytes:
        return self.encoder.encode(data)

    def decode(self, data: bytes) -> bytes:
        return self.decoder.decode(data)

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Compress the whole input stream into the output stream.
        """
        data = input_stream.read()
        if self.verbose:
            print(
                f"Compressing {len(data)} bytes (window {self.config.window_size}, "
                f"max match {self.config.max_match_length})"
            )
        encoded = self.encode(data)
        output_stream.write(encoded)
        return self._size_log(len(data), len(encoded))

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Decompress the whole input stream into the output stream.
        Nothing is written if the stream turns out to be malformed.
        """
        reader = BitReader.from_stream(input_stream)
        if self.verbose:
            print(f"Decompressing {len(reader.bits) // 8} bytes")
        decoded = self.decoder.decode_reader(reader)
        output_stream.write(decoded)
        return self._size_log(len(reader.bits) // 8, len(decoded))

    @staticmethod
    def _size_log(before: int, after: int) -> str:
        diff = before - after
        if diff > 0:
            return f"Size reduced by {diff} bytes ({diff * 100 / before:.1f}% total saving)"
        if diff < 0:
            return f"Size increased by {-diff} bytes"
        return "Size unchanged"
