import random
import unittest

from LZ_Pair import LZPair
from lz_config import LZ77Config
from lz_window import LZWindow


def window(data, window_size=4095, max_match_length=15):
    return LZWindow(data, LZ77Config(window_size, max_match_length))


class TestFind(unittest.TestCase):
    def test_no_match_at_start(self):
        self.assertIsNone(window(b"aaaa").find(0))

    def test_single_remaining_byte(self):
        self.assertIsNone(window(b"aa").find(1))

    def test_self_overlapping_run(self):
        # one byte of history covers the rest of the run
        self.assertEqual(window(b"a" * 10).find(1), LZPair(1, 9))

    def test_overlapping_pattern(self):
        self.assertEqual(window(b"abababab").find(2), LZPair(2, 6))

    def test_length_capped_by_max_match(self):
        self.assertEqual(window(b"a" * 40).find(1), LZPair(1, 15))
        self.assertEqual(window(b"a" * 40, max_match_length=14).find(1), LZPair(1, 14))

    def test_length_capped_by_remaining_input(self):
        self.assertEqual(window(b"a" * 40).find(36), LZPair(1, 4))

    def test_smallest_distance_wins_tie(self):
        data = b"abcXabcYabc"
        self.assertEqual(window(data).find(8), LZPair(4, 3))
        self.assertEqual(window(data).find_exhaustive(8), LZPair(4, 3))

    def test_longer_match_beats_closer_one(self):
        data = b"abcdXabcYabcd"
        self.assertEqual(window(data).find(9), LZPair(9, 4))

    def test_window_bound(self):
        data = b"abcdeabcde"
        self.assertIsNone(window(data, window_size=4).find(5))
        self.assertEqual(window(data, window_size=5).find(5), LZPair(5, 5))

    def test_single_byte_repeat_is_not_a_match(self):
        self.assertIsNone(window(b"abca").find(3))

    def test_bytearray_and_memoryview_input(self):
        data = b"xyzxyzxyz"
        expected = window(data).find(3)
        self.assertEqual(window(bytearray(data)).find(3), expected)
        self.assertEqual(window(memoryview(data)).find(3), expected)


class TestExhaustiveParity(unittest.TestCase):
    def test_exhaustive_agrees_with_vectorized(self):
        rng = random.Random(1234)
        for alphabet in (b"ab", b"abcd", bytes(range(16))):
            data = bytes(rng.choice(alphabet) for _ in range(100))
            for window_size in (1, 3, 16, 40):
                lz_window = window(data, window_size=window_size)
                for cursor in range(len(data)):
                    self.assertEqual(
                        lz_window.find(cursor),
                        lz_window.find_exhaustive(cursor),
                        f"alphabet={alphabet!r} window={window_size} cursor={cursor}",
                    )


if __name__ == "__main__":
    unittest.main()
