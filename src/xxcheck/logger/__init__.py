"""Logging utilities for xxcheck.

This package provides structured logging with:
- Colored console output on stderr (result lines own stdout)
- File rotation using standard RotatingFileHandler
- QueueHandler/QueueListener so handler I/O runs off the caller thread
- Configuration-based log levels
- Hierarchical logger naming (e.g., xxcheck.core.session)

Usage:
    >>> from xxcheck.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Line %d: %s", line_number, filename)

Environment Variables:
    XXCHECK_LOG_DIR: Override the log directory (used by the test suite).

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Handlers are only attached to the root 'xxcheck' logger
    4. Use %-formatting in log calls, never f-strings
    5. Check results ("OK", "FAILED", summaries) are not log records;
       they go through xxcheck.ui.display
"""

from typing import TYPE_CHECKING

from xxcheck.logger.config import (
    update_logger_from_config as _update_config,
)
from xxcheck.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from xxcheck.logger.handlers import ConfigurationError
from xxcheck.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from xxcheck.logger.state import get_state

if TYPE_CHECKING:
    from xxcheck.config import CheckConfig

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(config: "CheckConfig | None" = None) -> None:
    """Update logger handler levels from the settings file.

    Args:
        config: Already loaded configuration, if the caller has one.

    """
    _update_config(get_state(), config)
