"""Checksum verification engine.

Line reading, canonical digest decoding, line parsing, file hashing,
per-manifest sessions and the final verdict.
"""

from xxcheck.core.canonical import (
    canonical_from_hash,
    canonical_from_string,
    canonical_to_string,
    hash_from_canonical,
)
from xxcheck.core.checksum_parser import parse_line
from xxcheck.core.hasher import hash_stream, new_hasher
from xxcheck.core.line_reader import LineReader
from xxcheck.core.service import CheckService
from xxcheck.core.session import VerificationSession
from xxcheck.core.verdict import display_summary, resolve_verdict
from xxcheck.core.verifier import FileVerifier

__all__ = [
    "CheckService",
    "FileVerifier",
    "LineReader",
    "VerificationSession",
    "canonical_from_hash",
    "canonical_from_string",
    "canonical_to_string",
    "display_summary",
    "hash_from_canonical",
    "hash_stream",
    "new_hasher",
    "parse_line",
    "resolve_verdict",
]
