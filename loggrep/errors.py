"""Exceptions for loggrep.

Every exception here is fatal for a run: it is raised before the first
line is processed or at the moment the run can no longer continue.
Per-line problems are reported as outcomes, not exceptions.
"""

from __future__ import annotations


class LoggrepError(Exception):
    """Base exception for fatal loggrep errors."""


class ConfigError(LoggrepError):
    """Raised when the command-line arguments do not form a valid run."""


class InvalidPatternError(LoggrepError):
    """Raised when a user-supplied regular expression does not compile.

    Attributes:
        pattern: The pattern text that failed to compile.
    """

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Invalid regex pattern {pattern!r}: {reason}")


class FormatNotFoundError(LoggrepError):
    """Raised when an explicitly named format is not in the registry.

    Attributes:
        name: The requested format name.
        available: Names that are registered, in registry order.
    """

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f"Format '{name}' not found")


class NoFormatMatchError(LoggrepError):
    """Raised when autodetection finds no template for the sample line."""


class UnknownFieldError(LoggrepError):
    """Raised when the requested field is not a group of the resolved format.

    Attributes:
        field: The requested field name.
        format_name: The resolved format.
        valid_fields: The format's field names.
    """

    def __init__(self, field: str, format_name: str, valid_fields: list[str]):
        self.field = field
        self.format_name = format_name
        self.valid_fields = valid_fields
        super().__init__(
            f"Format '{format_name}' has no field '{field}'. "
            f"Valid fields: {', '.join(valid_fields)}"
        )


class InputError(LoggrepError):
    """Raised when the input stream cannot be read as text."""
