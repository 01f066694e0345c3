"""Per-line filtering for loggrep.

The LineProcessor decides the fate of one line at a time. It never writes
anything itself; the caller acts on the returned Outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from loggrep.core.pattern import Pattern
from loggrep.models.template import FormatTemplate


class Outcome(Enum):
    """What happens to a line.

    EMIT: write the line to the output.
    SUPPRESS: drop the line silently.
    MALFORMED: drop the line and report that it is not in the format.
    """

    EMIT = "emit"
    SUPPRESS = "suppress"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class LineResult:
    """The decision for one input line.

    Attributes:
        line_number: Position of the line in the input (1-indexed).
        line: The line as read, without its line terminator.
        outcome: What to do with it.
    """

    line_number: int
    line: str
    outcome: Outcome


class LineProcessor:
    """Applies a template, a pattern and the invert flag to single lines.

    Example:
        processor = LineProcessor(template, RegexPattern("^5"), "status")
        if processor.process(line) is Outcome.EMIT:
            print(line)
    """

    def __init__(
        self,
        template: FormatTemplate,
        pattern: Pattern,
        field: str,
        invert: bool = False,
    ) -> None:
        self.template = template
        self.pattern = pattern
        self.field = field
        self.invert = invert

    def process(self, line: str) -> Outcome:
        """Decide whether a line passes the filter.

        Blank lines are suppressed. Lines that do not fit the template are
        MALFORMED. Lines that fit but did not capture the field (an optional
        or alternative group that took no part in the match) are suppressed
        regardless of invert. Otherwise the pattern result, flipped when
        inverting, selects EMIT or SUPPRESS.

        Args:
            line: One input line.

        Returns:
            The Outcome for the line.
        """
        if not line.strip():
            return Outcome.SUPPRESS

        fields = self.template.extract(line)
        if fields is None:
            return Outcome.MALFORMED

        value = fields.get(self.field)
        if value is None:
            return Outcome.SUPPRESS

        if self.pattern.matches(value) != self.invert:
            return Outcome.EMIT
        return Outcome.SUPPRESS
