"""Main CLI module for loggrep.

This module re-exports the CLI for convenience. The main implementation
is in __main__.py.
"""

from loggrep.__main__ import cli

__all__ = ["cli"]
