"""Exceptions raised by fintrack."""


class FintrackError(Exception):
    """Base class for fintrack errors."""


class InvalidInputError(FintrackError, ValueError):
    """Raised when user input cannot be parsed into a transaction field."""


class CodecError(FintrackError, ValueError):
    """Raised when the data file cannot be decoded into transactions."""
