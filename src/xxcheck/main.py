"""Main CLI entry point for xxcheck."""

import sys

from xxcheck.cli import CLIRunner
from xxcheck.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application and exit with its status.

    Raises:
        SystemExit: Always, carrying the exit status.

    """
    try:
        status = CLIRunner().run()
    except KeyboardInterrupt:
        logger.info("Check cancelled by user")
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)
    sys.exit(status)


if __name__ == "__main__":
    main()
