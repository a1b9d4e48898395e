"""
Exceptions raised by EmbedRank.

Both concrete errors also subclass ValueError, so callers that already catch
ValueError for bad input keep working.
"""


class EmbedRankError(Exception):
    """Base class for all EmbedRank errors."""


class DimensionMismatchError(EmbedRankError, ValueError):
    """Two vectors that must be compared have different dimensions."""


class InvalidOptionError(EmbedRankError, ValueError):
    """A ranking option or sample record is malformed."""
