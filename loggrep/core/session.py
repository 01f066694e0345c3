"""Session control for a loggrep run.

A Session turns a RunConfig into work over an input stream: it resolves the
format (named or autodetected from the first line), then either filters
every line or describes the format using the first line as a sample.

The session only produces results. Writing lines and diagnostics is left to
the caller so the command decides where each kind of output goes.
"""

from __future__ import annotations

import shlex
from collections.abc import Iterable, Iterator
from typing import Optional

from loggrep.core.detect import candidates, detect
from loggrep.core.pattern import Pattern, compile_pattern
from loggrep.core.processor import LineProcessor, LineResult, Outcome
from loggrep.core.registry import DEFAULT_REGISTRY, FormatRegistry
from loggrep.errors import ConfigError, NoFormatMatchError, UnknownFieldError
from loggrep.models.config import RunConfig
from loggrep.models.report import FormatReport
from loggrep.models.template import FormatTemplate

PROG_NAME = "loggrep"


class Session:
    """Drives one run of loggrep.

    Configuration problems that can be found without reading input (bad
    regex, unknown format name, unknown field of a named format) are raised
    from the constructor, before any line is consumed.

    Example:
        session = Session(RunConfig.from_args(field="status", pattern="^5"))
        for result in session.filter(lines):
            if result.outcome is Outcome.EMIT:
                print(result.line)
    """

    def __init__(self, config: RunConfig, registry: FormatRegistry = DEFAULT_REGISTRY) -> None:
        """Initialize the session.

        Args:
            config: The run configuration.
            registry: Formats available to the run.

        Raises:
            InvalidPatternError: If the pattern is not a valid regex.
            FormatNotFoundError: If the named format is not registered.
            UnknownFieldError: If the named format has no such field.
        """
        self.config = config
        self.registry = registry
        self.template: Optional[FormatTemplate] = None
        self.pattern: Optional[Pattern] = None

        if config.mode == "filter":
            self.pattern = compile_pattern(
                config.pattern,
                fixed_strings=config.fixed_strings,
                ignore_case=config.ignore_case,
            )

        if config.format_name is not None:
            self._use_template(registry.lookup(config.format_name))

    def resolve_template(self, sample: str) -> FormatTemplate:
        """Resolve the format, autodetecting from the sample if needed.

        Args:
            sample: The first non-blank input line.

        Returns:
            The template for the run.

        Raises:
            NoFormatMatchError: If autodetection fails.
            UnknownFieldError: If the detected format has no such field.
        """
        if self.template is None:
            self._use_template(detect(self.registry, sample))
        return self.template

    def filter(self, lines: Iterable[str]) -> Iterator[LineResult]:
        """Filter an input stream line by line.

        When autodetecting, the first non-blank line selects the format and
        is then filtered like every other line.

        Args:
            lines: Input lines without line terminators.

        Yields:
            One LineResult per input line, in input order.

        Raises:
            ConfigError: If the run has no field and pattern.
            NoFormatMatchError: If autodetection fails.
            UnknownFieldError: If the detected format has no such field.
        """
        if self.config.mode != "filter":
            raise ConfigError("Filtering needs a field and a pattern")

        processor = self._processor() if self.template is not None else None

        for line_number, line in enumerate(lines, start=1):
            if processor is None:
                if not line.strip():
                    yield LineResult(line_number, line, Outcome.SUPPRESS)
                    continue
                self.resolve_template(line)
                processor = self._processor()
            yield LineResult(line_number, line, processor.process(line))

    def describe(self, lines: Iterable[str]) -> FormatReport:
        """Describe the format using the first non-blank line as a sample.

        Only the lines up to and including the sample are consumed.

        Args:
            lines: Input lines without line terminators.

        Returns:
            A FormatReport for the resolved format and the sample.

        Raises:
            NoFormatMatchError: If autodetecting and there is no sample or no
                format accepts it.
        """
        sample = next((line for line in lines if line.strip()), None)

        if sample is None:
            if self.template is None:
                raise NoFormatMatchError("No input to detect the format from")
            return self._report(self.template, None)

        return self._report(self.resolve_template(sample), sample)

    def _use_template(self, template: FormatTemplate) -> None:
        field = self.config.field
        if field is not None and field not in template.field_names:
            raise UnknownFieldError(field, template.name, template.field_names)
        self.template = template

    def _processor(self) -> LineProcessor:
        return LineProcessor(
            self.template,
            self.pattern,
            self.config.field,
            invert=self.config.invert,
        )

    def _report(self, template: FormatTemplate, sample: Optional[str]) -> FormatReport:
        values: dict[str, str] = {}
        also_matches: list[str] = []
        example = None

        if sample is not None:
            values = template.extract(sample) or {}
            also_matches = [
                other.name for other in candidates(self.registry, sample)
                if other.name != template.name
            ]

        if values:
            first_field, first_value = next(iter(values.items()))
            example = shlex.join([
                PROG_NAME,
                "--format",
                template.name,
                "--fixed-strings",
                first_field,
                first_value,
            ])

        return FormatReport(
            format_name=template.name,
            description=template.description,
            field_names=template.field_names,
            sample=sample.strip() if sample is not None else None,
            values=values,
            example=example,
            also_matches=also_matches,
        )
