"""Pytest configuration and fixtures for xxcheck tests."""

import getpass
import io
import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

# Keep test logs out of the user's config directory; must be set before
# any xxcheck module creates its logger.
os.environ.setdefault(
    "XXCHECK_LOG_DIR",
    str(Path(tempfile.gettempdir()) / f"pytest-of-{getpass.getuser()}-xxcheck"),
)

from xxcheck.domain.types import BitWidth  # noqa: E402
from xxcheck.ui.display import CheckDisplay  # noqa: E402


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("xxcheck"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings directory at a per-test temporary directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("XXCHECK_CONFIG_DIR", str(config_dir))
    return config_dir


class CapturedDisplay(CheckDisplay):
    """CheckDisplay writing to in-memory streams."""

    def __init__(self) -> None:
        super().__init__(out=io.StringIO(), err=io.StringIO())

    @property
    def results(self) -> list[str]:
        """Result lines written so far."""
        return self.out.getvalue().splitlines()

    @property
    def diagnostics(self) -> list[str]:
        """Diagnostic lines written so far."""
        return self.err.getvalue().splitlines()


@pytest.fixture
def display() -> CapturedDisplay:
    """Return a display that records results and diagnostics."""
    return CapturedDisplay()


class LengthHasher:
    """Stand-in hash: 0xd41d8cd9 for empty input, byte count otherwise."""

    EMPTY_DIGEST = 0xD41D8CD9

    def __init__(self, width: BitWidth, seed: int) -> None:
        self.width = width
        self.seed = seed
        self.total = 0

    def update(self, data) -> None:
        self.total += len(data)

    def intdigest(self) -> int:
        return self.EMPTY_DIGEST if self.total == 0 else self.total


@pytest.fixture
def length_hasher() -> type[LengthHasher]:
    """Return the stand-in hasher factory."""
    return LengthHasher


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Return a helper creating files under tmp_path."""

    def _make(name: str, content: bytes = b"") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _make
