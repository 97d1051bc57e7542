class ExtractionError(Exception):
    """Base exception for DOB extraction errors."""


class MalformedDateError(ExtractionError, ValueError):
    """Raised when a date string does not split into day, month and year."""
