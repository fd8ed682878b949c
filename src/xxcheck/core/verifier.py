"""File verification against a parsed checksum line."""

from __future__ import annotations

from xxcheck.constants import BLOCK_SIZE
from xxcheck.core.canonical import (
    canonical_from_hash,
    canonical_to_string,
    hash_from_canonical,
)
from xxcheck.core.hasher import HasherFactory, hash_stream, new_hasher
from xxcheck.domain.types import LineStatus, ParsedLine
from xxcheck.logger import get_logger

logger = get_logger(__name__)


class FileVerifier:
    """Hashes listed files and compares them with their expected digest.

    One verifier serves a whole manifest, so its read block is allocated
    once and reused for every file.
    """

    def __init__(
        self,
        block_size: int = BLOCK_SIZE,
        hasher_factory: HasherFactory = new_hasher,
    ) -> None:
        """Create a verifier.

        Args:
            block_size: Size of the reusable read buffer in bytes.
            hasher_factory: Source of the streaming hash states.

        """
        if block_size < 1:
            message = "Block size must be positive"
            raise ValueError(message)
        self.block = bytearray(block_size)
        self.hasher_factory = hasher_factory

    def verify(self, parsed: ParsedLine) -> LineStatus:
        """Hash the file named by ``parsed`` and compare the digest.

        Any ``OSError`` while opening or reading the file is reported as
        FAILED_TO_OPEN rather than as a mismatch, as is a filename that
        cannot name a file at all (embedded NUL).

        Args:
            parsed: The well-formed manifest line.

        Returns:
            HASH_OK, HASH_FAILED or FAILED_TO_OPEN.

        """
        try:
            with open(parsed.filename, "rb") as stream:
                actual = hash_stream(
                    stream, parsed.width, self.block, self.hasher_factory
                )
        except (OSError, ValueError) as e:
            logger.debug("Cannot read %r: %s", parsed.filename, e)
            return LineStatus.FAILED_TO_OPEN

        expected = hash_from_canonical(parsed.canonical)
        if actual != expected:
            logger.debug(
                "%s mismatch for %r: expected %s, computed %s",
                parsed.width.name,
                parsed.filename,
                canonical_to_string(parsed.canonical),
                canonical_to_string(canonical_from_hash(actual, parsed.width)),
            )
            return LineStatus.HASH_FAILED

        return LineStatus.HASH_OK
