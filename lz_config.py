"""
Configuration shared by the LZ77 encoder and decoder.
"""

from dataclasses import dataclass

from lz_errors import InvalidWindowSizeError, LZ77ConfigError

DISTANCE_BITS = 12
LENGTH_BITS = 4

MAX_WINDOW_SIZE = (1 << DISTANCE_BITS) - 1  # 4095
MAX_MATCH_LENGTH = (1 << LENGTH_BITS) - 1  # 15
MIN_MATCH_LENGTH = 2


@dataclass(frozen=True)
class LZ77Config:
    """
    Immutable codec settings.

    The window size is not stored in the compressed stream, so the same
    configuration has to be used on both sides.

    Attributes:
        window_size: How far back (in bytes) a match may start. Values above
            MAX_WINDOW_SIZE are clamped to it.
        max_match_length: Longest run a single back reference may cover.
    """

    window_size: int = MAX_WINDOW_SIZE
    max_match_length: int = MAX_MATCH_LENGTH

    def __post_init__(self) -> None:
        window_size = self.window_size
        if isinstance(window_size, bool) or not isinstance(window_size, int):
            raise InvalidWindowSizeError(
                f"Window size must be an integer, got {window_size!r}"
            )
        if window_size < 1:
            raise InvalidWindowSizeError(
                f"Window size must be at least 1, got {window_size}"
            )
        # frozen dataclass, so the clamp goes through object.__setattr__
        object.__setattr__(self, "window_size", min(window_size, MAX_WINDOW_SIZE))

        length = self.max_match_length
        if isinstance(length, bool) or not isinstance(length, int):
            raise LZ77ConfigError(
                f"Maximum match length must be an integer, got {length!r}"
            )
        if not MIN_MATCH_LENGTH <= length <= MAX_MATCH_LENGTH:
            raise LZ77ConfigError(
                f"Maximum match length must be in "
                f"[{MIN_MATCH_LENGTH}, {MAX_MATCH_LENGTH}], got {length}"
            )
