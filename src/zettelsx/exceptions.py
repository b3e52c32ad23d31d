#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the zettelsx library.

Constructors, accessors and the walker never raise on malformed nodes; they
return empty results instead. Exceptions are reserved for the reader of
external text.

Exception Hierarchy
-------------------
- ZettelSxError (base exception)

  - SxReadError (s-expression text could not be read)

"""


class ZettelSxError(Exception):
    """Base exception class for all zettelsx-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class SxReadError(ZettelSxError):
    """Exception raised when s-expression text is malformed.

    Parameters
    ----------
    message : str
        Description of the problem
    position : int, optional
        Character offset in the input where the problem was detected
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, position: int | None = None, original_error: Exception | None = None):
        """Initialize the read error with the failing position."""
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message, original_error=original_error)
        self.position = position


__all__ = [
    "ZettelSxError",
    "SxReadError",
]
