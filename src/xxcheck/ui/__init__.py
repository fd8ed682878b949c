"""User-facing output for xxcheck."""

from xxcheck.ui.display import CheckDisplay

__all__ = ["CheckDisplay"]
