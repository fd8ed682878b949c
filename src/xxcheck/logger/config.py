"""Configuration loading and updating for the logging system.

Bootstrap defaults are used while modules import; the settings file
levels are applied afterwards through ``update_logger_from_config``,
which imports the config module late to avoid a circular import.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from xxcheck.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV,
    LOG_FILE_NAME,
)
from xxcheck.logger.handlers import level_number

if TYPE_CHECKING:
    from xxcheck.config import CheckConfig
    from xxcheck.logger.state import LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Environment Variable Override:
        XXCHECK_LOG_DIR: Overrides the log directory path. The test suite
        sets it so test runs never write to the user's log directory.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV)
    if env_log_dir:
        log_dir = Path(env_log_dir).expanduser()
    else:
        log_dir = (
            Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR / "logs"
        )

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_dir / LOG_FILE_NAME


def apply_log_levels(
    state: "LoggerState", console_level: str, file_level: str
) -> None:
    """Set handler levels on the running QueueListener.

    Only updates handler levels, never adds or removes handlers.

    Args:
        state: Logger state object (from logger.state module)
        console_level: Level name for the console handler
        file_level: Level name for the file handler

    """
    if state.queue_listener is None:
        return

    console = level_number(console_level, logging.WARNING)
    file = level_number(file_level, logging.INFO)

    for handler in state.queue_listener.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(file)
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(console)


def update_logger_from_config(
    state: "LoggerState", config: "CheckConfig | None" = None
) -> None:
    """Update logger handler levels from the settings file.

    Args:
        state: Logger state object (from logger.state module)
        config: Already loaded configuration; loaded here when omitted

    Note:
        Errors while loading the config leave the bootstrap levels in
        place so that logging never breaks application startup.

    """
    try:
        if config is None:
            from xxcheck.config import ConfigManager  # noqa: PLC0415

            config = ConfigManager().load_config()

        apply_log_levels(state, config.console_log_level, config.log_level)
    except (ImportError, KeyError, AttributeError, OSError):
        # Config not readable yet; keep bootstrap defaults
        pass
