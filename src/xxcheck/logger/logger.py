"""Main logger module providing public API functions.

- setup_logging(): Configure logging with QueueHandler architecture
- get_logger(): Get or create logger instance with singleton pattern
- flush_all_handlers(): Ensure all pending log records are written
- clear_logger_state(): Clear global logger state for testing
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from xxcheck.logger.config import load_log_settings
from xxcheck.logger.handlers import ConfigurationError, setup_root_logger
from xxcheck.logger.state import get_state


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener to ensure writes complete.

    Waits for the queue to drain, then flushes each handler. Used before
    shutdown and by tests that read the log file back.
    """
    state = get_state()
    if state.queue_listener is not None and state.log_queue is not None:
        timeout = 5.0
        start_time = time.time()
        while not state.log_queue.empty():
            if time.time() - start_time > timeout:
                break
            time.sleep(0.01)

        time.sleep(0.05)

        for handler in state.queue_listener.handlers:
            with contextlib.suppress(OSError, ValueError):
                handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = "xxcheck",
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the named logger.

    The root ``xxcheck`` logger is initialized exactly once; child
    loggers such as ``xxcheck.core.session`` propagate to it.

    Handler Configuration (via QueueListener):
        - Console Handler: StreamHandler on stderr
        - File Handler: RotatingFileHandler, 1MB rotation, 3 backups

    Args:
        name: Logger name, typically __name__ for module-level loggers
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
            (default: ~/.config/xxcheck/logs/xxcheck.log)
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance (singleton per name via logging.getLogger)

    Note:
        When the log file cannot be created, logging continues on the
        console only and a warning is emitted.

    """
    state = get_state()
    file_error: ConfigurationError | None = None
    with state.lock:
        if not state.root_initialized:
            if console_level is None or file_level is None or log_file is None:
                cfg_console, cfg_file, cfg_path = load_log_settings()
                console_level = console_level or cfg_console
                file_level = file_level or cfg_file
                log_file = log_file or cfg_path

            try:
                setup_root_logger(
                    state,
                    console_level,
                    file_level,
                    log_file,
                    enable_file_logging,
                )
            except ConfigurationError as e:
                file_error = e
                setup_root_logger(
                    state, console_level, file_level, log_file, False
                )

    if file_error is not None:
        logging.getLogger("xxcheck").warning(
            "File logging disabled: %s", file_error
        )

    return logging.getLogger(name)


def get_logger(
    name: str = "xxcheck",
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Get or create logger instance with singleton pattern.

    Best Practice:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Checking %s", manifest_name)

    Args:
        name: Logger name, typically __name__ for module loggers
        enable_file_logging: Whether to enable file logging (default: True)

    Returns:
        Configured logger instance (singleton per name)

    """
    return setup_logging(
        name=name,
        enable_file_logging=enable_file_logging,
    )


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener, closes handlers, resets state flags and
    removes ``xxcheck`` loggers from the logging manager.

    Warning:
        Intended for tests only.

    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            for handler in state.queue_listener.handlers:
                handler.close()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith("xxcheck"):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
                if logger_name in logging.Logger.manager.loggerDict:
                    del logging.Logger.manager.loggerDict[logger_name]
