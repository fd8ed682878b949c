"""Handlers behind the ``xxcheck`` root logger.

The root logger only carries a QueueHandler. A QueueListener thread
drains the queue into a stderr console handler and, unless disabled, a
rotating log file.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from xxcheck.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from xxcheck.logger.formatters import HybridConsoleFormatter
from xxcheck.logger.state import LoggerState

ROOT_LOGGER_NAME = "xxcheck"


class ConfigurationError(Exception):
    """Error in logging configuration."""


def level_number(level: str, default: int) -> int:
    """Return the numeric level for a level name, or ``default``."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else default


def _console_handler(console_level: str) -> logging.Handler:
    # stdout belongs to check results
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        HybridConsoleFormatter(LOG_CONSOLE_FORMAT, LOG_CONSOLE_DATE_FORMAT)
    )
    handler.setLevel(level_number(console_level, logging.WARNING))
    return handler


def _file_handler(log_file: Path, file_level: str) -> RotatingFileHandler:
    """Open the rotating log file, rolling over an oversized one first.

    Raises:
        ConfigurationError: If the directory or file cannot be created.

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        oversized = (
            log_file.exists()
            and log_file.stat().st_size >= LOG_ROTATION_THRESHOLD_BYTES
        )
        handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        if oversized:
            handler.doRollover()
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise ConfigurationError(msg) from e

    handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    handler.setLevel(level_number(file_level, logging.INFO))
    return handler


def setup_root_logger(
    state: LoggerState,
    console_level: str,
    file_level: str,
    log_file: Path,
    enable_file_logging: bool,  # noqa: FBT001
) -> None:
    """Attach a QueueHandler to the root logger and start its listener.

    Args:
        state: Logging state receiving the queue and listener
        console_level: Console log level (e.g., "WARNING")
        file_level: File log level (e.g., "INFO")
        log_file: Path to the rotating log file
        enable_file_logging: Whether to write the log file at all

    Raises:
        ConfigurationError: If the log file cannot be opened; nothing is
            attached in that case.

    """
    handlers = [_console_handler(console_level)]
    if enable_file_logging:
        handlers.append(_file_handler(log_file, file_level))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    root_logger.propagate = False
    for old in root_logger.handlers[:]:
        old.close()
        root_logger.removeHandler(old)

    state.log_queue = queue.Queue()
    state.queue_listener = QueueListener(
        state.log_queue, *handlers, respect_handler_level=True
    )
    state.queue_listener.start()
    root_logger.addHandler(QueueHandler(state.log_queue))
    state.root_initialized = True
