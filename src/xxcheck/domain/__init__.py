"""Domain types for checksum verification."""

from xxcheck.domain.types import (
    BitWidth,
    CanonicalDigest,
    ChecksumReport,
    LineStatus,
    ParsedLine,
    VerificationPolicy,
)

__all__ = [
    "BitWidth",
    "CanonicalDigest",
    "ChecksumReport",
    "LineStatus",
    "ParsedLine",
    "VerificationPolicy",
]
