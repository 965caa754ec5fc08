# lz_window.py

from typing import Optional

import numpy as np

from LZ_Pair import LZPair
from lz_config import MIN_MATCH_LENGTH, LZ77Config


class LZWindow:
    """
    Sliding window match finder for LZ77.
    Looks back at most `window_size` bytes from the cursor for the longest run
    equal to the bytes starting at the cursor. The source run may overlap the
    cursor (distance < length): it is then read cyclically, the same way the
    decoder replays it.

    Among runs of the same length the smallest distance wins.
    """

    def __init__(self, data, config: LZ77Config):
        """
        :param data: bytes-like input (bytes, bytearray, memoryview, mmap)
        :param config: window size and maximum match length
        """
        self.data = data
        self.config = config
        self.view = np.frombuffer(data, dtype=np.uint8)
        self._steps = np.arange(config.max_match_length)

    def _limit(self, cursor: int) -> int:
        return min(self.config.max_match_length, len(self.view) - cursor)

    def find(self, cursor: int) -> Optional[LZPair]:
        """
        Search every distance at once.
        Returns LZPair(dist, length) or None if no run of MIN_MATCH_LENGTH exists.
        """
        limit = self._limit(cursor)
        if limit < MIN_MATCH_LENGTH or cursor == 0:
            return None

        reach = min(cursor, self.config.window_size)
        # row i is the candidate at distance i + 1
        starts = cursor - np.arange(1, reach + 1)
        positions = starts[:, np.newaxis] + self._steps[:limit]
        # positions past the cursor read the look-ahead, which equals the
        # cyclic copy for as long as the prefix keeps matching
        equal = self.view[positions] == self.view[cursor : cursor + limit]
        lengths = np.logical_and.accumulate(equal, axis=1).sum(axis=1)

        best = int(lengths.argmax())  # first maximum -> smallest distance
        length = int(lengths[best])
        if length < MIN_MATCH_LENGTH:
            return None
        return LZPair(best + 1, length)

    def find_exhaustive(self, cursor: int) -> Optional[LZPair]:
        """
        Brute-force search: for every length from MIN_MATCH_LENGTH upwards
        and every start in the window, build the cyclic copy of the source
        and compare it with the look-ahead.
        """
        data = self.data
        limit = self._limit(cursor)
        start_index = max(0, cursor - self.config.window_size)

        best_dist = 0
        best_len = 0
        for length in range(MIN_MATCH_LENGTH, limit + 1):
            to_match = bytes(data[cursor : cursor + length])
            for start in range(start_index, cursor):
                dist = cursor - start
                candidate = bytes(data[start + k % dist] for k in range(length))
                if candidate != to_match:
                    continue
                if length > best_len or (length == best_len and dist < best_dist):
                    best_len = length
                    best_dist = dist

        if best_len > 0 and best_dist > 0:
            return LZPair(best_dist, best_len)
        return None
