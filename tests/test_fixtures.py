"""Tests to verify that conftest fixtures work correctly."""

import pytest
from pathlib import Path


def test_project_root_fixture(project_root):
    """project_root fixture returns correct path."""
    assert isinstance(project_root, Path)
    assert project_root.exists()
    assert (project_root / "pyproject.toml").exists()


@pytest.mark.parametrize(
    "name",
    ["nginx", "syslog-bsd", "python", "postgresql", "update-alternatives", "dpkg", "clf"],
)
def test_example_log_exists(examples_dir, name):
    """Every built-in format has an example log."""
    sample = examples_dir / name / "sample.log"
    assert sample.exists()
    assert sample.read_text().strip()


def test_sample_lines_cover_registry(sample_lines):
    """sample_lines fixture has a line for every built-in format."""
    from loggrep.core.registry import DEFAULT_REGISTRY

    assert set(sample_lines) == set(DEFAULT_REGISTRY.names())
