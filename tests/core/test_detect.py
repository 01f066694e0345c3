"""Tests for format autodetection."""

import pytest

from loggrep.core.detect import candidates, detect
from loggrep.core.registry import DEFAULT_REGISTRY, FormatRegistry
from loggrep.errors import NoFormatMatchError
from loggrep.models.template import FormatTemplate


def test_detects_every_builtin_format(sample_lines):
    for name, line in sample_lines.items():
        assert detect(DEFAULT_REGISTRY, line).name == name


def test_detection_is_idempotent(sample_lines):
    """The detected template always decodes the line it was detected from."""
    for line in sample_lines.values():
        template = detect(DEFAULT_REGISTRY, line)
        assert template.extract(line) is not None


def test_sample_is_trimmed(nginx_line):
    assert detect(DEFAULT_REGISTRY, f"  {nginx_line}  ").name == "nginx"


def test_nginx_wins_over_clf(nginx_line):
    """A combined line with '-' ident fits both; registry order decides."""
    assert [t.name for t in candidates(DEFAULT_REGISTRY, nginx_line)] == ["nginx", "clf"]
    assert detect(DEFAULT_REGISTRY, nginx_line).name == "nginx"


def test_first_in_registry_order_wins():
    loose = FormatTemplate(name="loose", pattern=r"(?P<all>.*)")
    digits = FormatTemplate(name="digits", pattern=r"(?P<n>\d+)")

    assert detect(FormatRegistry([loose, digits]), "123").name == "loose"
    assert detect(FormatRegistry([digits, loose]), "123").name == "digits"


def test_no_match_raises():
    with pytest.raises(NoFormatMatchError) as exc:
        detect(DEFAULT_REGISTRY, "some random content that no format recognizes")
    assert "nginx" in str(exc.value)


def test_blank_sample_raises():
    with pytest.raises(NoFormatMatchError):
        detect(DEFAULT_REGISTRY, "   ")


def test_candidates_empty_when_nothing_matches():
    assert candidates(DEFAULT_REGISTRY, "nothing here") == []
