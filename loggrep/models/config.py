"""RunConfig data model for loggrep.

The run configuration is built once from the command line and never changes
while lines are processed.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from loggrep.errors import ConfigError


class RunConfig(BaseModel):
    """Options for a single loggrep run.

    Attributes:
        format_name: Format to use, or None to autodetect from the first line.
        field: Field to filter on. Set together with pattern or not at all.
        pattern: Pattern the field value is tested against.
        ignore_case: Match without regard to case.
        invert: Select lines whose field does NOT match.
        fixed_strings: Treat the pattern as a literal string compared for
            equality instead of a regular expression.
    """

    model_config = ConfigDict(frozen=True)

    format_name: Optional[str] = None
    field: Optional[str] = None
    pattern: Optional[str] = None
    ignore_case: bool = False
    invert: bool = False
    fixed_strings: bool = False

    @classmethod
    def from_args(
        cls,
        format_name: Optional[str] = None,
        field: Optional[str] = None,
        pattern: Optional[str] = None,
        ignore_case: bool = False,
        invert: bool = False,
        fixed_strings: bool = False,
    ) -> "RunConfig":
        """Create a RunConfig from command-line values.

        Raises:
            ConfigError: If only one of field and pattern is given.
        """
        if (field is None) != (pattern is None):
            missing = "pattern" if pattern is None else "field"
            raise ConfigError(f"A field and a pattern must be given together (missing {missing})")
        return cls(
            format_name=format_name,
            field=field,
            pattern=pattern,
            ignore_case=ignore_case,
            invert=invert,
            fixed_strings=fixed_strings,
        )

    @property
    def autodetect(self) -> bool:
        return self.format_name is None

    @property
    def mode(self) -> Literal["filter", "describe"]:
        """"filter" when a field and pattern are set, otherwise "describe"."""
        return "filter" if self.field is not None else "describe"
