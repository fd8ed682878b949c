"""CLI argument parser for xxcheck."""

import argparse
import sys
from argparse import Namespace
from collections.abc import Sequence

from xxcheck.constants import VALID_LOG_LEVELS


class CLIParser:
    """Command-line argument parser for xxcheck."""

    def __init__(self, prog: str | None = None) -> None:
        """Initialize the CLI parser.

        Args:
            prog: Program name shown in usage text.

        """
        self.parser = self._create_main_parser(prog)
        self._add_check_options(self.parser)
        self._add_global_options(self.parser)

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (default: sys.argv[1:]).

        Returns:
            Namespace: Parsed arguments namespace.

        """
        return self.parser.parse_args(argv)

    def print_usage_error(self) -> None:
        """Print the bad-usage message and usage line to stderr."""
        sys.stderr.write("Wrong parameters\n")
        self.parser.print_usage(sys.stderr)

    def _create_main_parser(
        self, prog: str | None
    ) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog=prog,
            description="Read xxHash sums from manifests and check them",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Manifest lines have the form "<hash>  <filename>", with an 8 character
(XXH32) or 16 character (XXH64) hex hash and two spaces.

Examples:
  %(prog)s SUMS.xxh64
  %(prog)s --quiet --warn a.xxh32 b.xxh32
  cat SUMS.xxh64 | %(prog)s --status && echo verified
            """,
        )

    def _add_check_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "manifests",
            nargs="*",
            metavar="FILE",
            help="Checksum manifests to check; '-' or none reads stdin",
        )
        parser.add_argument(
            "-c",
            "--check",
            action="store_true",
            help="Check mode (always on, accepted for compatibility)",
        )
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Exit non-zero for improperly formatted checksum lines",
        )
        parser.add_argument(
            "--status",
            action="store_true",
            help="Don't output anything, status code shows success",
        )
        parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Don't print OK for each successfully verified file",
        )
        parser.add_argument(
            "-w",
            "--warn",
            action="store_true",
            help="Warn about improperly formatted checksum lines",
        )
        parser.add_argument(
            "--little-endian",
            action="store_true",
            help="Little endian hash display (not supported when checking)",
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-V",
            "--version",
            action="store_true",
            help="Show xxcheck version and exit",
        )
        parser.add_argument(
            "--log-level",
            choices=VALID_LOG_LEVELS,
            type=str.upper,
            help="Console log level for this run (overrides settings.conf)",
        )
