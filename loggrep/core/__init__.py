"""Core logic for loggrep.

This module provides the format-matching engine:
- FormatRegistry: Built-in log formats in detection order
- detect: Format autodetection from a sample line
- Pattern: Regex and fixed-string value matching
- LineProcessor: Per-line extraction and filter decision
- Session: Format resolution and filter/describe runs
"""

from loggrep.core.detect import candidates, detect
from loggrep.core.pattern import FixedPattern, Pattern, RegexPattern, compile_pattern
from loggrep.core.processor import LineProcessor, LineResult, Outcome
from loggrep.core.registry import BUILTIN_TEMPLATES, DEFAULT_REGISTRY, FormatRegistry
from loggrep.core.session import Session

__all__ = [
    "BUILTIN_TEMPLATES",
    "DEFAULT_REGISTRY",
    "FixedPattern",
    "FormatRegistry",
    "LineProcessor",
    "LineResult",
    "Outcome",
    "Pattern",
    "RegexPattern",
    "Session",
    "candidates",
    "compile_pattern",
    "detect",
]
