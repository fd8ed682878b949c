"""Domain types for checksum verification.

This module contains pure domain types used by the verification engine
without any IO dependencies.
"""

from dataclasses import dataclass
from enum import Enum


class BitWidth(Enum):
    """Supported digest widths."""

    XXH32 = 32
    XXH64 = 64

    @property
    def digest_size(self) -> int:
        """Number of bytes in the canonical digest."""
        return self.value // 8

    @property
    def hex_length(self) -> int:
        """Number of hex characters in a manifest digest field."""
        return self.digest_size * 2

    @classmethod
    def from_hex_length(cls, length: int) -> "BitWidth | None":
        """Return the width whose digest field has ``length`` characters."""
        for width in cls:
            if width.hex_length == length:
                return width
        return None


@dataclass(frozen=True, slots=True)
class CanonicalDigest:
    """Big-endian digest bytes tagged with their width."""

    width: BitWidth
    digest: bytes

    def __post_init__(self) -> None:
        """Reject byte strings that do not match the width."""
        if len(self.digest) != self.width.digest_size:
            message = (
                f"{self.width.name} canonical digest needs "
                f"{self.width.digest_size} bytes, got {len(self.digest)}"
            )
            raise ValueError(message)


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """One well-formed manifest line.

    Attributes:
        canonical: Expected digest from the line.
        filename: Path named by the line, owned by this object.

    """

    canonical: CanonicalDigest
    filename: str

    @property
    def width(self) -> BitWidth:
        """Width of the expected digest."""
        return self.canonical.width


class LineStatus(Enum):
    """Outcome of verifying one file."""

    HASH_OK = "ok"
    HASH_FAILED = "failed"
    FAILED_TO_OPEN = "failed_to_open"


@dataclass(frozen=True, slots=True)
class VerificationPolicy:
    """Output and verdict policy for a check run.

    Attributes:
        strict: Any improperly formatted line fails the verdict.
        status_only: Suppress result and summary output.
        warn: Report improperly formatted lines on the diagnostic channel.
        quiet: Suppress "OK" lines.

    """

    strict: bool = False
    status_only: bool = False
    warn: bool = False
    quiet: bool = False


@dataclass(slots=True)
class ChecksumReport:
    """Counters accumulated while checking one manifest."""

    n_properly_formatted_lines: int = 0
    n_improperly_formatted_lines: int = 0
    n_mismatched_checksums: int = 0
    n_open_or_read_failures: int = 0
    n_mixed_format_lines: int = 0
    xxh_bits: BitWidth | None = None
    quit: bool = False

    @property
    def has_failures(self) -> bool:
        """Whether any listed file failed to verify."""
        return bool(self.n_mismatched_checksums or self.n_open_or_read_failures)
