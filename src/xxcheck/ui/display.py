"""Output channels for check results and diagnostics.

Result lines ("OK", "FAILED", summary counts) are written to the result
stream (stdout by default); diagnostics about the manifest itself are
written to the diagnostic stream (stderr by default), so results can be
piped cleanly.
"""

from __future__ import annotations

import sys
from typing import TextIO


class CheckDisplay:
    """Writes check output to separate result and diagnostic streams."""

    def __init__(
        self,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        """Create a display.

        Args:
            out: Result stream; defaults to the current ``sys.stdout``.
            err: Diagnostic stream; defaults to the current ``sys.stderr``.

        """
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        """Result stream."""
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        """Diagnostic stream."""
        return self._err if self._err is not None else sys.stderr

    def result(self, text: str) -> None:
        """Write one result line."""
        print(text, file=self.out)

    def diagnostic(self, text: str) -> None:
        """Write one diagnostic line after flushing pending results."""
        self.out.flush()
        print(text, file=self.err)
