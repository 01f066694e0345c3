"""FormatTemplate data model for loggrep.

A template is a named, anchored regular expression whose named groups are
the fields a line of that format can be filtered on.
"""

from __future__ import annotations

import re
from functools import cached_property
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class FormatTemplate(BaseModel):
    """A named log line format.

    Templates are immutable and shared for the lifetime of the process.
    The pattern is validated (compiled) when the template is created, so a
    broken built-in template fails at import time rather than per line.

    Attributes:
        name: Unique identifier for the format (e.g., "nginx").
        pattern: Regular expression with named groups, matched against the
            whole trimmed line.
        description: Human-readable description of the format.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    pattern: str
    description: str = ""

    @field_validator("pattern")
    @classmethod
    def validate_regex(cls, v: str) -> str:
        """Validate that the pattern compiles and defines named groups."""
        try:
            compiled = re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid regex pattern: {e}") from e
        if not compiled.groupindex:
            raise ValueError("Template pattern must define at least one named group")
        return v

    @cached_property
    def regex(self) -> re.Pattern[str]:
        """The compiled extraction pattern."""
        return re.compile(self.pattern)

    @property
    def field_names(self) -> list[str]:
        """Names of all fields in declaration order."""
        groups = self.regex.groupindex
        return sorted(groups, key=groups.__getitem__)

    def extract(self, line: str) -> Optional[dict[str, str]]:
        """Extract fields from a line.

        The line is trimmed and must match the pattern in its entirety.
        Groups that did not take part in the match (optional or alternative
        groups) are left out of the result.

        Args:
            line: The log line to decode.

        Returns:
            Mapping of field name to captured value in declaration order,
            or None if the line is not in this format.
        """
        match = self.regex.fullmatch(line.strip())
        if match is None:
            return None
        captured = match.groupdict()
        return {name: captured[name] for name in self.field_names if captured[name] is not None}

    def matches(self, line: str) -> bool:
        """Check whether a line is in this format."""
        return self.extract(line) is not None
