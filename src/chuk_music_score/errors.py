"""Exceptions raised by the score model."""


class MusicScoreError(Exception):
    """Base exception for all score model errors."""

    pass


class RangeError(MusicScoreError, ValueError):
    """A pitch key or transposition would leave 0-127."""

    pass


class ValidationError(MusicScoreError, ValueError):
    """A structural precondition was violated (index, tick interval, velocity)."""

    pass


class UnsupportedOperationError(MusicScoreError):
    """The operation is undefined for this object (e.g. harmonizing chromatic)."""

    pass
