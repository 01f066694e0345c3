"""FormatReport data model for loggrep's describe mode."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class FormatReport(BaseModel):
    """What loggrep knows about a format and one sample line.

    Attributes:
        format_name: The resolved format.
        description: The format's description.
        field_names: Every field the format defines, in declaration order.
        sample: The sample line (trimmed), or None if the input was empty.
        values: Field values extracted from the sample, for the groups that
            matched. Empty when there is no sample or it did not match.
        example: An example command filtering on the first extracted field,
            or None when nothing was extracted.
        also_matches: Other formats that accept the sample, in registry order.
    """

    model_config = ConfigDict(frozen=True)

    format_name: str
    description: str = ""
    field_names: list[str]
    sample: Optional[str] = None
    values: dict[str, str] = {}
    example: Optional[str] = None
    also_matches: list[str] = []

    @property
    def sample_matched(self) -> bool:
        return bool(self.values)
