"""Command-line interface for xxcheck."""

from xxcheck.cli.parser import CLIParser
from xxcheck.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
