"""Parser for xxHash checksum lines.

A line has the form::

    <8 or 16 hex chars><space><space><filename>

The filename is everything after the two spaces and may itself contain
spaces. It may be empty; opening it then fails during verification.
"""

from __future__ import annotations

import os

from xxcheck.core.canonical import canonical_from_string
from xxcheck.domain.types import BitWidth, ParsedLine
from xxcheck.exceptions import ChecksumFormatError

_SPACE = ord(" ")


def parse_line(line: bytes) -> ParsedLine:
    """Parse a single manifest record.

    Args:
        line: Record bytes without the trailing newline.

    Returns:
        The parsed line; its filename is an owned ``str`` decoded with
        ``os.fsdecode`` so undecodable bytes still reach ``open``.

    Raises:
        ChecksumFormatError: If the separator is missing or not two
            spaces, the digest field is not 8 or 16 characters long, or
            the digest is not hexadecimal.

    """
    first_space = line.find(b" ")
    if first_space < 0:
        msg = "missing separator"
        raise ChecksumFormatError(msg)

    second_space = first_space + 1
    if second_space >= len(line) or line[second_space] != _SPACE:
        msg = "digest must be followed by two spaces"
        raise ChecksumFormatError(msg)

    width = BitWidth.from_hex_length(first_space)
    if width is None:
        msg = f"digest field has {first_space} characters, expected 8 or 16"
        raise ChecksumFormatError(msg)

    canonical = canonical_from_string(line[:first_space], width)
    filename = os.fsdecode(line[second_space + 1 :])

    return ParsedLine(canonical=canonical, filename=filename)
