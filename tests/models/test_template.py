"""Tests for FormatTemplate model."""

import pytest
from loggrep.models.template import FormatTemplate


def _levels():
    return FormatTemplate(
        name="levels",
        pattern=r"(?P<level>[A-Z]+) (?P<message>.*)",
        description="Level then message",
    )


def test_template_creation():
    t = _levels()
    assert t.name == "levels"
    assert t.description == "Level then message"


def test_invalid_regex_rejected():
    with pytest.raises(ValueError):
        FormatTemplate(name="bad", pattern=r"(?P<x>[unclosed")


def test_pattern_without_named_groups_rejected():
    with pytest.raises(ValueError):
        FormatTemplate(name="plain", pattern=r"\d+ \w+")


def test_template_is_frozen():
    t = _levels()
    with pytest.raises(Exception):
        t.name = "other"


def test_field_names_in_declaration_order():
    t = FormatTemplate(name="t", pattern=r"(?P<zeta>\w+) (?P<alpha>\w+) (?P<mid>\w+)")
    assert t.field_names == ["zeta", "alpha", "mid"]


def test_extract_returns_fields():
    fields = _levels().extract("ERROR disk full")
    assert fields == {"level": "ERROR", "message": "disk full"}


def test_extract_trims_line():
    fields = _levels().extract("   ERROR disk full  \n")
    assert fields == {"level": "ERROR", "message": "disk full"}


def test_extract_requires_full_match():
    """A match on only part of the line is not a match."""
    t = FormatTemplate(name="t", pattern=r"(?P<n>\d+)")
    assert t.extract("123") == {"n": "123"}
    assert t.extract("123 trailing") is None
    assert t.extract("leading 123") is None


def test_extract_omits_groups_that_did_not_match():
    t = FormatTemplate(name="t", pattern=r"(?P<a>\w+)(?: (?P<b>\w+))?")
    assert t.extract("one") == {"a": "one"}
    assert t.extract("one two") == {"a": "one", "b": "two"}


def test_matches():
    t = _levels()
    assert t.matches("INFO ok")
    assert not t.matches("lowercase ok")
