"""loggrep - filter structured log lines by the value of a named field."""

__version__ = "0.1.0"
