"""CLI runner for xxcheck.

Turns parsed arguments and settings into a verification policy, runs the
check service and maps the combined verdict to an exit status.
"""

import dataclasses
import sys
from argparse import Namespace
from collections.abc import Sequence

from xxcheck import __version__
from xxcheck.config import CheckConfig, ConfigManager
from xxcheck.core.service import CheckService
from xxcheck.domain.types import VerificationPolicy
from xxcheck.logger import get_logger, update_logger_from_config
from xxcheck.ui.display import CheckDisplay

from .parser import CLIParser

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class CLIRunner:
    """CLI command runner."""

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        display: CheckDisplay | None = None,
    ) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            config_manager: Settings loader (default: user settings).
            display: Result and diagnostic channels.

        """
        self.config_manager = config_manager or ConfigManager()
        self.display = display or CheckDisplay()
        self.cli_parser = CLIParser(prog="xxcheck")

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Parse arguments and check the requested manifests.

        Args:
            argv: Command-line arguments (default: sys.argv[1:]).

        Returns:
            0 if every manifest passed, 1 otherwise.

        """
        args = self.cli_parser.parse_args(argv)

        if args.version:
            self.display.result(f"xxcheck {__version__}")
            return EXIT_OK

        config = self.config_manager.load_config()
        if args.log_level:
            config = dataclasses.replace(
                config, console_log_level=args.log_level
            )
        update_logger_from_config(config)

        if not args.manifests and sys.stdin.isatty():
            self.cli_parser.print_usage_error()
            return EXIT_FAILURE

        policy = self.build_policy(args, config)
        logger.debug("Checking %s with %s", args.manifests or "stdin", policy)

        service = CheckService(
            policy,
            display=self.display,
            block_size=config.block_size,
            little_endian=args.little_endian,
        )
        ok = service.check_files(args.manifests)
        return EXIT_OK if ok else EXIT_FAILURE

    @staticmethod
    def build_policy(args: Namespace, config: CheckConfig) -> VerificationPolicy:
        """Combine command-line flags with the configured defaults."""
        return VerificationPolicy(
            strict=args.strict or config.strict,
            status_only=args.status,
            warn=args.warn or config.warn,
            quiet=args.quiet or config.quiet,
        )
