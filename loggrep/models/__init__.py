"""Data models for loggrep."""

from loggrep.models.config import RunConfig
from loggrep.models.report import FormatReport
from loggrep.models.template import FormatTemplate

__all__ = [
    "FormatReport",
    "FormatTemplate",
    "RunConfig",
]
