"""
Exceptions raised by the Gomoku core.
"""


class GomokuError(Exception):
    """Base class for all Gomoku errors."""


class OutOfRangeError(GomokuError, IndexError):
    """A point lies outside the board, or a move index outside the history.

    This signals a bug at the call site and is never caught inside the package.
    """


class CorruptInputError(GomokuError, ValueError):
    """A serialized game record could not be decoded."""


class InvalidURIError(CorruptInputError):
    """A game URI is malformed and was rejected before decoding."""
