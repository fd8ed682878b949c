"""Conversion between hex digests, canonical bytes and hash values.

Canonical form is the big-endian byte encoding of a digest, independent
of host byte order.
"""

from __future__ import annotations

from xxcheck.constants import HEX_DIGITS
from xxcheck.domain.types import BitWidth, CanonicalDigest
from xxcheck.exceptions import ChecksumFormatError


def canonical_from_string(
    hash_str: str | bytes, width: BitWidth
) -> CanonicalDigest:
    """Decode a hex digest field into canonical bytes.

    Exactly ``width.hex_length`` characters are consumed; each must be
    one of 0-9, A-F or a-f. No separators or whitespace are accepted.

    Args:
        hash_str: Hex digest text, upper or lower case.
        width: Digest width the field is expected to encode.

    Returns:
        The canonical digest.

    Raises:
        ChecksumFormatError: If the field has the wrong length or holds a
            non-hex character.

    """
    if isinstance(hash_str, bytes):
        try:
            hash_str = hash_str.decode("ascii")
        except UnicodeDecodeError as e:
            msg = "digest contains non-ASCII characters"
            raise ChecksumFormatError(msg) from e

    if len(hash_str) != width.hex_length:
        msg = (
            f"{width.name} digest needs {width.hex_length} hex characters, "
            f"got {len(hash_str)}"
        )
        raise ChecksumFormatError(msg)

    if not all(char in HEX_DIGITS for char in hash_str):
        msg = f"invalid hex digest: {hash_str!r}"
        raise ChecksumFormatError(msg)

    return CanonicalDigest(width, bytes.fromhex(hash_str))


def canonical_to_string(canonical: CanonicalDigest) -> str:
    """Return the lowercase hex text of a canonical digest."""
    return canonical.digest.hex()


def canonical_from_hash(value: int, width: BitWidth) -> CanonicalDigest:
    """Encode a native hash value as canonical big-endian bytes."""
    return CanonicalDigest(width, value.to_bytes(width.digest_size, "big"))


def hash_from_canonical(canonical: CanonicalDigest) -> int:
    """Decode canonical big-endian bytes back into a native hash value."""
    return int.from_bytes(canonical.digest, "big")
