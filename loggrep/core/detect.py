"""Format autodetection.

Detection tries every registered template against a sample line in
registry order. The first template that accepts the whole (trimmed) line
wins, so the result is stable for a given registry.
"""

from __future__ import annotations

from loggrep.core.registry import FormatRegistry
from loggrep.errors import NoFormatMatchError
from loggrep.models.template import FormatTemplate


def candidates(registry: FormatRegistry, sample: str) -> list[FormatTemplate]:
    """List every template that accepts the sample, in registry order.

    Args:
        registry: Registry to search.
        sample: A single log line.

    Returns:
        Matching templates; empty if none match.
    """
    return [template for template in registry if template.matches(sample)]


def detect(registry: FormatRegistry, sample: str) -> FormatTemplate:
    """Detect the format of a sample line.

    Args:
        registry: Registry to search.
        sample: A single log line.

    Returns:
        The first template (in registry order) that accepts the sample.

    Raises:
        NoFormatMatchError: If the sample is blank or no template accepts it.
    """
    if not sample.strip():
        raise NoFormatMatchError("Cannot detect format from an empty line")

    for template in registry:
        if template.matches(sample):
            return template

    raise NoFormatMatchError(
        f"No known format matches the first line. "
        f"Tried: {', '.join(registry.names())}"
    )
