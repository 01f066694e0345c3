"""Shared pytest fixtures for loggrep tests."""

import pytest
from pathlib import Path


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def examples_dir(project_root):
    """Directory holding one sample log per built-in format."""
    return project_root / "examples"


@pytest.fixture
def nginx_line():
    """A single nginx access log line."""
    return (
        '66.249.65.159 - - [06/Nov/2014:19:10:38 +0600] '
        '"GET /x HTTP/1.1" 404 177 "-" "UA"'
    )


@pytest.fixture
def python_lines():
    """Two lines in the default Python logging format."""
    return ["ERROR:root:bad thing", "INFO:app.sub:ok"]


@pytest.fixture
def sample_lines():
    """One hand-written line per built-in format."""
    return {
        "nginx": '66.249.65.159 - - [06/Nov/2014:19:10:38 +0600] "GET /x HTTP/1.1" 404 177 "-" "UA"',
        "syslog-bsd": "<34>Oct 11 22:14:15 mymachine su: 'su root' failed for lonvick on /dev/pts/8",
        "python": "ERROR:root:bad thing",
        "postgresql": "2023-05-01 10:02:13.480 UTC [4211] postgres@shop ERROR:  relation does not exist",
        "update-alternatives": "update-alternatives 2023-01-15 10:23:50: run with --install /usr/bin/editor editor /bin/nano 40",
        "dpkg": "2023-01-15 10:23:47 status unpacked nano:amd64 6.2-1",
        "clf": '127.0.0.1 user-identifier frank [10/Oct/2000:13:55:36 -0700] "GET /apache_pb.gif HTTP/1.0" 200 2326',
    }


# Pytest markers
def pytest_configure(config):
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
