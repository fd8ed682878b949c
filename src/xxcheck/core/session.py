"""Per-manifest verification session.

A session reads one manifest line by line, parses each line, verifies
the named file and accumulates a ChecksumReport. Malformed lines and
unreadable files are counted and skipped; only a failure to read the
manifest itself (line too long, out of memory, too many lines) ends the
session early.
"""

from __future__ import annotations

from typing import BinaryIO

from xxcheck.constants import BLOCK_SIZE, MAX_LINE_NUMBER
from xxcheck.core.checksum_parser import parse_line
from xxcheck.core.hasher import HasherFactory, new_hasher
from xxcheck.core.line_reader import LineReader
from xxcheck.core.verifier import FileVerifier
from xxcheck.domain.types import (
    ChecksumReport,
    LineStatus,
    ParsedLine,
    VerificationPolicy,
)
from xxcheck.exceptions import (
    ChecksumFormatError,
    ManifestReadError,
    TooManyLinesError,
)
from xxcheck.logger import get_logger
from xxcheck.ui.display import CheckDisplay

logger = get_logger(__name__)


class VerificationSession:
    """Checks every line of one manifest stream.

    The caller owns the stream and is responsible for closing it.
    """

    def __init__(
        self,
        name: str,
        stream: BinaryIO,
        policy: VerificationPolicy,
        display: CheckDisplay | None = None,
        block_size: int = BLOCK_SIZE,
        hasher_factory: HasherFactory = new_hasher,
        line_reader: LineReader | None = None,
        max_line_number: int = MAX_LINE_NUMBER,
    ) -> None:
        """Create a session for one manifest.

        Args:
            name: Manifest name used in diagnostics.
            stream: Binary manifest stream.
            policy: Output and verdict policy.
            display: Result and diagnostic channels.
            block_size: Read block size for hashing listed files.
            hasher_factory: Source of the streaming hash states.
            line_reader: Reader holding the line buffer.
            max_line_number: Abort once the line counter passes this.

        """
        self.name = name
        self.stream = stream
        self.policy = policy
        self.display = display or CheckDisplay()
        self.reader = line_reader or LineReader()
        self.verifier = FileVerifier(block_size, hasher_factory)
        self.max_line_number = max_line_number
        self.report = ChecksumReport()

    def run(self) -> ChecksumReport:
        """Process the manifest until end of input or abort.

        Returns:
            The report for this manifest.

        """
        self.report = ChecksumReport()
        line_number = 0

        while not self.report.quit:
            line_number += 1
            try:
                if line_number > self.max_line_number:
                    msg = f"more than {self.max_line_number} lines"
                    raise TooManyLinesError(msg, target=self.name)
                line = self.reader.read_line(self.stream)
            except TooManyLinesError as e:
                self.display.diagnostic(f"{self.name} : {e.reason}")
                self._abort(e)
                break
            except ManifestReadError as e:
                self.display.diagnostic(
                    f"{self.name} : {line_number}: {e.reason}"
                )
                self._abort(e)
                break

            if line is None:
                break

            self._process_line(line, line_number)

        logger.debug("Finished %s: %s", self.name, self.report)
        return self.report

    def _abort(self, error: ManifestReadError) -> None:
        logger.debug("Aborting %s: %s", self.name, error)
        self.report.quit = True

    def _process_line(self, line: bytes, line_number: int) -> None:
        report = self.report

        try:
            parsed = parse_line(line)
        except ChecksumFormatError as e:
            logger.debug("%s:%d: %s", self.name, line_number, e.message)
            report.n_improperly_formatted_lines += 1
            if self.policy.warn:
                self.display.diagnostic(
                    f"{self.name} : {line_number}: "
                    "improperly formatted XXHASH checksum line"
                )
            return

        if report.xxh_bits is not None and report.xxh_bits != parsed.width:
            # xxh32 and xxh64 lines are not accepted in one manifest
            report.n_improperly_formatted_lines += 1
            report.n_mixed_format_lines += 1
            if self.policy.warn:
                self.display.diagnostic(
                    f"{self.name} : {line_number}: "
                    "improperly formatted XXHASH checksum line (XXH32/64)"
                )
            return

        report.n_properly_formatted_lines += 1
        if report.xxh_bits is None:
            report.xxh_bits = parsed.width

        status = self.verifier.verify(parsed)
        self._report_status(status, parsed, line_number)

    def _report_status(
        self, status: LineStatus, parsed: ParsedLine, line_number: int
    ) -> None:
        report = self.report
        policy = self.policy

        if status is LineStatus.FAILED_TO_OPEN:
            report.n_open_or_read_failures += 1
            if not policy.status_only:
                self.display.result(
                    f"{self.name} : {line_number}: "
                    f"FAILED open or read {parsed.filename}"
                )
            return

        if status is LineStatus.HASH_FAILED:
            report.n_mismatched_checksums += 1
            if not policy.status_only:
                self.display.result(f"{parsed.filename}: FAILED")
            return

        if not (policy.quiet or policy.status_only):
            self.display.result(f"{parsed.filename}: OK")
