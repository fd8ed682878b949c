"""Streaming xxHash computation over file contents.

The hash algorithms come from the ``xxhash`` library. Any object with
``update(data)`` and ``intdigest()`` can stand in for them through a
``HasherFactory``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import BinaryIO, Protocol

import xxhash

from xxcheck.constants import XXHSUM32_DEFAULT_SEED, XXHSUM64_DEFAULT_SEED
from xxcheck.domain.types import BitWidth


class StreamingHasher(Protocol):
    """Incremental hash state: update repeatedly, then read the digest."""

    def update(self, data: bytes | memoryview) -> None: ...

    def intdigest(self) -> int: ...


HasherFactory = Callable[[BitWidth, int], StreamingHasher]

DEFAULT_SEEDS: dict[BitWidth, int] = {
    BitWidth.XXH32: XXHSUM32_DEFAULT_SEED,
    BitWidth.XXH64: XXHSUM64_DEFAULT_SEED,
}


def new_hasher(width: BitWidth, seed: int) -> StreamingHasher:
    """Return a freshly reset xxHash state for ``width``."""
    if width is BitWidth.XXH32:
        return xxhash.xxh32(seed=seed)
    return xxhash.xxh64(seed=seed)


def hash_stream(
    stream: BinaryIO,
    width: BitWidth,
    block: bytearray,
    hasher_factory: HasherFactory = new_hasher,
) -> int:
    """Hash everything remaining in ``stream``.

    Data is read with ``readinto`` into ``block`` so one buffer serves
    every file of a session. The result does not depend on how reads
    are chunked.

    Args:
        stream: Binary stream to consume.
        width: Digest width to compute.
        block: Reusable read buffer; its length is the block size.
        hasher_factory: Creates the hash state for ``width``.

    Returns:
        The native digest value.

    Raises:
        OSError: If reading the stream fails.

    """
    hasher = hasher_factory(width, DEFAULT_SEEDS[width])
    view = memoryview(block)
    while True:
        read_size = stream.readinto(view)
        if not read_size:
            break
        hasher.update(view[:read_size])
    return hasher.intdigest()
