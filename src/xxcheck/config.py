"""INI configuration for xxcheck.

Settings live in ``~/.config/xxcheck/settings.conf`` (directory
overridable through ``XXCHECK_CONFIG_DIR``)::

    [DEFAULT]
    config_version = 1.1.0
    log_level = INFO
    console_log_level = WARNING

    [check]
    strict = false
    warn = false
    quiet = false
    block_size = 65536

The ``[check]`` flags are defaults; command-line flags can only turn
them on.
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from packaging.version import InvalidVersion, Version

from xxcheck.constants import (
    BLOCK_SIZE,
    CONFIG_DIR_ENV,
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ISO_DATETIME_FORMAT,
    KEY_BLOCK_SIZE,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_QUIET,
    KEY_STRICT,
    KEY_WARN,
    SECTION_CHECK,
    SECTION_DEFAULT,
    VALID_LOG_LEVELS,
)
from xxcheck.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """Loaded settings."""

    config_version: str = CONFIG_VERSION
    log_level: str = DEFAULT_LOG_LEVEL
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    strict: bool = False
    warn: bool = False
    quiet: bool = False
    block_size: int = BLOCK_SIZE


def default_config_dir() -> Path:
    """Return the configuration directory, honoring XXCHECK_CONFIG_DIR."""
    env_dir = os.getenv(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR


def _strip_inline_comment(value: str) -> str:
    """Strip inline comments from configuration values.

    Args:
        value: Configuration value that may contain inline comment

    Returns:
        Value with inline comment removed (anything after '  #')

    """
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value


def compare_versions(version1: str, version2: str) -> int:
    """Compare two version strings.

    Returns -1 if version1 < version2, 0 if equal, 1 if version1 > version2.
    Unparseable versions compare as older than any valid one.
    """
    try:
        v1 = Version(version1.lstrip("v"))
    except InvalidVersion:
        v1 = Version("0")
    try:
        v2 = Version(version2.lstrip("v"))
    except InvalidVersion:
        v2 = Version("0")

    if v1 < v2:
        return -1
    if v1 > v2:
        return 1
    return 0


class ConfigManager:
    """Loads and saves the INI settings file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to default_config_dir())

        """
        self.config_dir = config_dir or default_config_dir()
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def _new_parser(self) -> configparser.ConfigParser:
        return configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

    def load_config(self) -> CheckConfig:
        """Load settings, writing a default file when none exists.

        Returns:
            Loaded configuration; invalid values fall back to defaults.

        """
        if not self.settings_file.exists():
            config = CheckConfig()
            self._try_save(config)
            return config

        parser = self._new_parser()
        try:
            parser.read(self.settings_file, encoding="utf-8")
        except configparser.Error as e:
            logger.warning(
                "Cannot parse %s, using defaults: %s", self.settings_file, e
            )
            return CheckConfig()

        config = self._convert(parser)

        file_version = parser.defaults().get(KEY_CONFIG_VERSION, "0.0.0")
        file_version = _strip_inline_comment(file_version)
        order = compare_versions(file_version, CONFIG_VERSION)
        if order < 0:
            logger.info(
                "Upgrading %s from version %s to %s",
                self.settings_file,
                file_version,
                CONFIG_VERSION,
            )
            self._try_save(config)
        elif order > 0:
            logger.warning(
                "%s has newer config version %s (supported: %s)",
                self.settings_file,
                file_version,
                CONFIG_VERSION,
            )

        return config

    def _convert(self, parser: configparser.ConfigParser) -> CheckConfig:
        defaults = CheckConfig()
        if not parser.has_section(SECTION_CHECK):
            parser.add_section(SECTION_CHECK)

        def get_level(key: str, default: str) -> str:
            value = _strip_inline_comment(
                parser.get(SECTION_DEFAULT, key, fallback=default)
            ).upper()
            if value not in VALID_LOG_LEVELS:
                logger.warning("Invalid %s %r, using %s", key, value, default)
                return default
            return value

        def get_flag(key: str, default: bool) -> bool:  # noqa: FBT001
            try:
                return parser.getboolean(SECTION_CHECK, key, fallback=default)
            except ValueError:
                logger.warning("Invalid %s value, using %s", key, default)
                return default

        try:
            block_size = parser.getint(
                SECTION_CHECK, KEY_BLOCK_SIZE, fallback=defaults.block_size
            )
        except ValueError:
            block_size = 0
        if block_size < 1:
            logger.warning(
                "Invalid %s, using %d", KEY_BLOCK_SIZE, defaults.block_size
            )
            block_size = defaults.block_size

        return CheckConfig(
            config_version=CONFIG_VERSION,
            log_level=get_level(KEY_LOG_LEVEL, defaults.log_level),
            console_log_level=get_level(
                KEY_CONSOLE_LOG_LEVEL, defaults.console_log_level
            ),
            strict=get_flag(KEY_STRICT, defaults.strict),
            warn=get_flag(KEY_WARN, defaults.warn),
            quiet=get_flag(KEY_QUIET, defaults.quiet),
            block_size=block_size,
        )

    def _try_save(self, config: CheckConfig) -> None:
        try:
            self.save_config(config)
        except OSError as e:
            logger.warning("Cannot write %s: %s", self.settings_file, e)

    def save_config(self, config: CheckConfig) -> None:
        """Save configuration to the INI file with explanatory comments.

        Args:
            config: Configuration to save

        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)

        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(
                "# xxcheck configuration\n"
                f"# Last updated: {timestamp}\n"
                "#\n"
                "# log_level: Detail level for the log file\n"
                "# console_log_level: Detail level for log records on stderr\n"
                "\n"
                f"[{SECTION_DEFAULT}]\n"
                f"{KEY_CONFIG_VERSION} = {CONFIG_VERSION}"
                "  # DO NOT MODIFY - Config format version\n"
                f"{KEY_LOG_LEVEL} = {config.log_level}\n"
                f"{KEY_CONSOLE_LOG_LEVEL} = {config.console_log_level}\n"
                "\n"
                "# Defaults for check runs; command-line flags add to these.\n"
                "# strict: exit non-zero for improperly formatted lines\n"
                "# warn: warn about improperly formatted lines\n"
                "# quiet: don't print OK for verified files\n"
                "# block_size: read size in bytes when hashing files\n"
                f"[{SECTION_CHECK}]\n"
                f"{KEY_STRICT} = {str(config.strict).lower()}\n"
                f"{KEY_WARN} = {str(config.warn).lower()}\n"
                f"{KEY_QUIET} = {str(config.quiet).lower()}\n"
                f"{KEY_BLOCK_SIZE} = {config.block_size}\n"
            )
