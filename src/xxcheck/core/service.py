"""Checking one or more manifests and combining their verdicts."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import BinaryIO

from xxcheck.constants import BLOCK_SIZE, STDIN_NAME
from xxcheck.core.hasher import HasherFactory, new_hasher
from xxcheck.core.session import VerificationSession
from xxcheck.core.verdict import display_summary, resolve_verdict
from xxcheck.domain.types import VerificationPolicy
from xxcheck.logger import get_logger
from xxcheck.ui.display import CheckDisplay

logger = get_logger(__name__)


class CheckService:
    """Runs a verification session per manifest.

    Manifests are processed one after another; each gets a fresh session
    and report, and the overall result is the AND of their verdicts.
    """

    def __init__(
        self,
        policy: VerificationPolicy,
        display: CheckDisplay | None = None,
        block_size: int = BLOCK_SIZE,
        hasher_factory: HasherFactory = new_hasher,
        little_endian: bool = False,  # noqa: FBT001, FBT002
        stdin: BinaryIO | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            policy: Output and verdict policy shared by all manifests.
            display: Result and diagnostic channels.
            block_size: Read block size for hashing listed files.
            hasher_factory: Source of the streaming hash states.
            little_endian: Digest display convention requested by the
                caller; check mode only accepts big endian.
            stdin: Stream used for the "-" manifest (default: stdin).

        """
        self.policy = policy
        self.display = display or CheckDisplay()
        self.block_size = block_size
        self.hasher_factory = hasher_factory
        self.little_endian = little_endian
        self._stdin = stdin

    def check_files(self, names: Sequence[str]) -> bool:
        """Check every manifest in ``names``; stdin when empty.

        Returns:
            True only if every manifest passed.

        """
        if not names:
            names = [STDIN_NAME]

        ok = True
        for name in names:
            ok &= self.check_file(name)
        return ok

    def check_file(self, name: str) -> bool:
        """Check a single manifest.

        Args:
            name: Manifest path, or "-" for standard input.

        Returns:
            The manifest's verdict.

        """
        if self.little_endian:
            self.display.diagnostic(
                "Check file mode doesn't support little endian"
            )
            return False

        if name == STDIN_NAME:
            stdin = self._stdin if self._stdin is not None else sys.stdin.buffer
            return self._check_stream(STDIN_NAME, stdin)

        try:
            stream = open(name, "rb")  # noqa: SIM115
        except OSError as e:
            logger.debug("Cannot open manifest %r: %s", name, e)
            self.display.diagnostic(f"Pb opening {name}")
            return False

        with stream:
            return self._check_stream(name, stream)

    def _check_stream(self, name: str, stream: BinaryIO) -> bool:
        logger.debug("Checking manifest %s", name)
        session = VerificationSession(
            name,
            stream,
            self.policy,
            display=self.display,
            block_size=self.block_size,
            hasher_factory=self.hasher_factory,
        )
        report = session.run()

        display_summary(name, report, self.policy, self.display)
        verdict = resolve_verdict(report, self.policy)
        logger.info(
            "%s: %d ok lines, %d bad lines, %d mismatches, %d unreadable -> %s",
            name,
            report.n_properly_formatted_lines,
            report.n_improperly_formatted_lines,
            report.n_mismatched_checksums,
            report.n_open_or_read_failures,
            "passed" if verdict else "failed",
        )
        return verdict
