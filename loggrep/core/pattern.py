"""Patterns for testing a field value.

A Pattern is built once per run from the user's input and then applied to
one field value per line. There are two kinds:

- RegexPattern: the value matches if the expression is found anywhere in it
  (search semantics; anchor with ^ and $ for a whole-value match).
- FixedPattern: the value matches if it is equal to the literal string.

Both honour a case-insensitivity flag fixed at construction.
"""

from __future__ import annotations

import re
import string
from abc import ABC, abstractmethod

from loggrep.errors import InvalidPatternError

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_fold(value: str) -> str:
    """Lowercase ASCII letters only, leaving other characters untouched."""
    return value.translate(_ASCII_LOWER)


class Pattern(ABC):
    """A predicate over a single field value."""

    ignore_case: bool

    @abstractmethod
    def matches(self, value: str) -> bool:
        """Check whether the value satisfies the pattern."""


class RegexPattern(Pattern):
    """Regular expression searched for anywhere in the value."""

    def __init__(self, expression: str, ignore_case: bool = False) -> None:
        """Compile the expression.

        Args:
            expression: Regular expression text.
            ignore_case: Whether to match case-insensitively.

        Raises:
            InvalidPatternError: If the expression does not compile.
        """
        flags = re.IGNORECASE if ignore_case else 0
        try:
            self.regex = re.compile(expression, flags)
        except re.error as e:
            raise InvalidPatternError(expression, str(e)) from e
        self.expression = expression
        self.ignore_case = ignore_case

    def matches(self, value: str) -> bool:
        return self.regex.search(value) is not None

    def __repr__(self) -> str:
        return f"RegexPattern({self.expression!r}, ignore_case={self.ignore_case})"


class FixedPattern(Pattern):
    """Literal string compared to the whole value.

    With ignore_case, ASCII letters compare without regard to case.
    """

    def __init__(self, text: str, ignore_case: bool = False) -> None:
        self.text = text
        self.ignore_case = ignore_case
        self._folded = _ascii_fold(text) if ignore_case else text

    def matches(self, value: str) -> bool:
        if self.ignore_case:
            return _ascii_fold(value) == self._folded
        return value == self.text

    def __repr__(self) -> str:
        return f"FixedPattern({self.text!r}, ignore_case={self.ignore_case})"


def compile_pattern(text: str, fixed_strings: bool = False, ignore_case: bool = False) -> Pattern:
    """Build the Pattern for the user's input.

    Args:
        text: The pattern text.
        fixed_strings: Compare literally instead of as a regular expression.
        ignore_case: Match case-insensitively.

    Returns:
        A FixedPattern or RegexPattern.

    Raises:
        InvalidPatternError: If text is not a valid regular expression
            (only when fixed_strings is False).
    """
    if fixed_strings:
        return FixedPattern(text, ignore_case=ignore_case)
    return RegexPattern(text, ignore_case=ignore_case)
