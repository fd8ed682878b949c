"""Centralized constants module for xxcheck.

This module serves as the single source of truth for all shared constants
across the xxcheck codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from xxcheck.constants import MAX_LINE_LENGTH
"""

import sys
from typing import Final

KB: Final[int] = 1024

# =============================================================================
# Manifest Line Constants
# =============================================================================

# 64-bit hex digest, two-space separator, a 4 KiB path and the sentinel slot
DEFAULT_LINE_LENGTH: Final[int] = 8 * 2 + 2 + 4096 + 1

# Hard ceiling for a single manifest record (bytes, terminator included)
MAX_LINE_LENGTH: Final[int] = 32 * KB

# Buffer growth factor numerator/denominator (x1.5)
LINE_GROWTH_NUMERATOR: Final[int] = 3
LINE_GROWTH_DENOMINATOR: Final[int] = 2

# Highest line number a session accepts before aborting
MAX_LINE_NUMBER: Final[int] = sys.maxsize

HEX_DIGITS: Final[str] = "0123456789abcdefABCDEF"

# =============================================================================
# Hashing Constants
# =============================================================================

BLOCK_SIZE: Final[int] = 64 * KB

XXHSUM32_DEFAULT_SEED: Final[int] = 0
XXHSUM64_DEFAULT_SEED: Final[int] = 0

# Manifest name meaning "read from standard input"
STDIN_NAME: Final[str] = "-"

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.1.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "xxcheck"
CONFIG_DIR_ENV: Final[str] = "XXCHECK_CONFIG_DIR"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_BACKUP_COUNT: Final[int] = 3

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_CHECK: Final[str] = "check"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_STRICT: Final[str] = "strict"
KEY_WARN: Final[str] = "warn"
KEY_QUIET: Final[str] = "quiet"
KEY_BLOCK_SIZE: Final[str] = "block_size"

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# =============================================================================
# Logging Constants
# =============================================================================

LOG_DIR_ENV: Final[str] = "XXCHECK_LOG_DIR"
LOG_FILE_NAME: Final[str] = "xxcheck.log"

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB

LOG_BACKUP_COUNT: Final[int] = DEFAULT_BACKUP_COUNT

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
