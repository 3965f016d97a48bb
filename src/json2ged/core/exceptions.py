class ConversionError(Exception):
    """Base exception for conversion failures."""


class InputNotFoundError(ConversionError, FileNotFoundError):
    """Raised when the JSON input does not exist or is not a file."""


class InputFormatError(ConversionError, ValueError):
    """Raised when the input cannot be parsed as JSON."""


class MissingIdentifierError(ConversionError, KeyError):
    """Raised when a family record has no 'id'."""

    def __init__(self, key, record):
        self.key = key
        self.record = record
        super().__init__(key, record)

    def __str__(self):
        return f"Missing attribute 'id' for family entry '{self.key}'"


class OutputWriteError(ConversionError, OSError):
    """Raised when the GEDCOM output cannot be written."""
