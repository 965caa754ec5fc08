"""
Exceptions raised by the LZ77 codec.
"""


class LZ77Error(Exception):
    """Base class for all codec errors."""


class LZ77ConfigError(LZ77Error, ValueError):
    """Raised when a codec configuration value is out of range."""


class InvalidWindowSizeError(LZ77ConfigError):
    """Raised when the requested window size is below 1 or not an integer."""


class MalformedStreamError(LZ77Error, ValueError):
    """Raised when a token stream cannot be decoded."""


class TruncatedTokenError(MalformedStreamError, EOFError):
    """Raised when the stream ends in the middle of a token."""


class InvalidReferenceError(MalformedStreamError):
    """Raised when a back reference points outside the decoded output."""
