import io
import os
import tempfile
import unittest

from bit_reader import BitReader
from bit_writer import BitWriter
from LZ_Pair import LZLiteral, LZPair
from lz_errors import MalformedStreamError, TruncatedTokenError


class TestBitWriter(unittest.TestCase):
    def test_msb_first_packing(self):
        writer = BitWriter()
        writer.write_bit(1)
        writer.write_bits_msb(0b0110000, 7)
        self.assertEqual(writer.to_bytes(), b"\xb0")

    def test_reference_fields_match_packed_bytes(self):
        writer = BitWriter()
        writer.write_bits_msb(0x123, 12)
        writer.write_bits_msb(7, 4)
        self.assertEqual(writer.to_bytes(), LZPair(0x123, 7).pack())

    def test_padding_is_zero(self):
        writer = BitWriter()
        writer.write_bits_msb(0b111, 3)
        self.assertEqual(len(writer), 3)
        self.assertEqual(writer.to_bytes(), b"\xe0")
        self.assertEqual(len(writer), 8)

    def test_value_too_wide(self):
        writer = BitWriter()
        with self.assertRaises(ValueError):
            writer.write_bits_msb(16, 4)
        with self.assertRaises(ValueError):
            writer.write_byte(256)
        with self.assertRaises(ValueError):
            writer.write_bits_msb(1, -1)

    def test_zero_length_write(self):
        writer = BitWriter()
        writer.write_bits_msb(0, 0)
        self.assertEqual(writer.to_bytes(), b"")

    def test_flush_to_stream_and_file(self):
        writer = BitWriter()
        writer.write_byte(0x41)
        writer.write_bit(1)
        out = io.BytesIO()
        self.assertEqual(writer.flush_to_stream(out), 2)
        self.assertEqual(out.getvalue(), b"\x41\x80")

        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "bits.bin")
            writer.flush_to_file(path)
            with open(path, "rb") as f:
                self.assertEqual(f.read(), b"\x41\x80")


class TestBitReader(unittest.TestCase):
    def test_read_bit_then_end_of_stream(self):
        reader = BitReader(b"\xa0")
        bits = [reader.read_bit() for _ in range(8)]
        self.assertEqual(bits, [1, 0, 1, 0, 0, 0, 0, 0])
        self.assertIsNone(reader.read_bit())

    def test_read_bits_msb(self):
        reader = BitReader(b"\x12\x37")
        self.assertEqual(reader.read_bits_msb(12), 0x123)
        self.assertEqual(reader.read_bits_msb(4), 7)
        self.assertEqual(reader.remaining(), 0)

    def test_read_bits_past_end(self):
        reader = BitReader(b"\xff")
        reader.read_bit()
        with self.assertRaises(TruncatedTokenError) as ctx:
            reader.read_byte()
        self.assertIsInstance(ctx.exception, EOFError)
        self.assertIsInstance(ctx.exception, MalformedStreamError)

    def test_only_padding_left(self):
        self.assertTrue(BitReader(b"").only_padding_left())
        reader = BitReader(b"\x80")
        self.assertFalse(reader.only_padding_left())
        reader.read_bit()
        self.assertTrue(reader.only_padding_left())
        # a whole zero byte is not padding
        self.assertFalse(BitReader(b"\x00").only_padding_left())

    def test_from_stream(self):
        reader = BitReader.from_stream(io.BytesIO(b"\x0f"))
        self.assertEqual(reader.read_bits_msb(4), 0)
        self.assertEqual(reader.read_bits_msb(4), 15)

    def test_from_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "bits.bin")
            with open(path, "wb") as f:
                f.write(b"\x12\x37")
            reader = BitReader.from_file(path)
        self.assertEqual(reader.read_bits_msb(12), 0x123)
        self.assertEqual(reader.read_bits_msb(4), 7)


class TestTokens(unittest.TestCase):
    def test_pack(self):
        self.assertEqual(LZPair(1, 2).pack(), b"\x00\x12")
        self.assertEqual(LZPair(0x123, 7).pack(), b"\x12\x37")
        self.assertEqual(LZPair(4095, 15).pack(), b"\xff\xff")

    def test_unpack(self):
        self.assertEqual(LZPair.unpack(0x12, 0x37), LZPair(0x123, 7))
        self.assertEqual(LZPair.unpack(0xFF, 0xFF), LZPair(4095, 15))

    def test_field_ranges(self):
        with self.assertRaises(ValueError):
            LZPair(4096, 2)
        with self.assertRaises(ValueError):
            LZPair(1, 16)
        with self.assertRaises(ValueError):
            LZLiteral(256)

    def test_equality(self):
        self.assertEqual(LZLiteral(97), LZLiteral(97))
        self.assertNotEqual(LZLiteral(97), LZLiteral(98))
        self.assertNotEqual(LZPair(1, 2), LZPair(2, 1))
        self.assertEqual(len({LZPair(3, 4), LZPair(3, 4)}), 1)


if __name__ == "__main__":
    unittest.main()
