"""Bounded line reader for checksum manifests.

Reads one newline-terminated record at a time into a growable buffer.
The buffer is reused between calls and grows by roughly 50% whenever
another byte arrives for a full buffer, up to MAX_LINE_LENGTH.
"""

from __future__ import annotations

from typing import BinaryIO

from xxcheck.constants import (
    DEFAULT_LINE_LENGTH,
    LINE_GROWTH_DENOMINATOR,
    LINE_GROWTH_NUMERATOR,
    MAX_LINE_LENGTH,
)
from xxcheck.exceptions import LineTooLongError, OutOfMemoryError
from xxcheck.logger import get_logger

logger = get_logger(__name__)


class LineReader:
    """Read manifest records with a capped, reusable buffer.

    Capacity counts the record bytes plus one terminator slot. A buffer
    holding ``capacity - 1`` bytes must grow before it accepts any
    further byte, the newline included. With the default ceiling a
    record of ``max_length - 2`` bytes plus its newline is the longest
    accepted; a final record without a newline may be one byte longer.
    """

    def __init__(
        self,
        initial_length: int = DEFAULT_LINE_LENGTH,
        max_length: int = MAX_LINE_LENGTH,
    ) -> None:
        """Create a reader; the buffer is allocated on first use.

        Args:
            initial_length: Capacity allocated on first read.
            max_length: Hard ceiling for the capacity.

        """
        self.initial_length = min(initial_length, max_length)
        self.max_length = max_length
        self.capacity = 0
        self._buffer = bytearray()

    def read_line(self, stream: BinaryIO) -> bytes | None:
        """Read the next record from ``stream``.

        Args:
            stream: Binary stream positioned at the start of a record.

        Returns:
            The record without its trailing newline, or None when the
            stream ended before any byte of a new record was read.

        Raises:
            LineTooLongError: The record does not fit in max_length.
            OutOfMemoryError: The buffer could not be grown.

        """
        try:
            if self.capacity < 1:
                self._allocate()

            del self._buffer[:]
            while True:
                room = self.capacity - 1 - len(self._buffer)
                if room > 0:
                    chunk = stream.readline(room)
                else:
                    chunk = stream.readline(1)
                    if chunk:
                        self._grow()

                if not chunk:
                    if not self._buffer:
                        return None
                    break

                if chunk.endswith(b"\n"):
                    self._buffer += chunk[:-1]
                    break

                self._buffer += chunk
        except MemoryError as e:
            msg = "line buffer allocation failed"
            raise OutOfMemoryError(msg) from e

        return bytes(self._buffer)

    def _allocate(self) -> None:
        self._buffer = bytearray()
        self.capacity = self.initial_length

    def _grow(self) -> None:
        new_capacity = (
            self.capacity * LINE_GROWTH_NUMERATOR // LINE_GROWTH_DENOMINATOR + 1
        )
        new_capacity = min(new_capacity, self.max_length)
        if len(self._buffer) + 1 >= new_capacity:
            msg = f"line does not fit in {self.max_length} bytes"
            raise LineTooLongError(msg)

        logger.debug(
            "Growing line buffer from %d to %d bytes",
            self.capacity,
            new_capacity,
        )
        self.capacity = new_capacity
