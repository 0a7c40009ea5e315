"""File-level helpers for hashing."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import BinaryIO

from sumtree.constants.manifest import FILE_HASH_CHUNK_SIZE, HASH_ALGORITHM


def stream_digest(
    handle: BinaryIO,
    *,
    algorithm: str = HASH_ALGORITHM,
    chunk_size: int = FILE_HASH_CHUNK_SIZE,
) -> str:
    """Return the hex digest of a binary stream, read in bounded chunks."""
    digest = hashlib.new(algorithm)
    for chunk in iter(lambda: handle.read(chunk_size), b""):
        digest.update(chunk)
    return digest.hexdigest()


def file_digest(
    path: Path,
    *,
    algorithm: str = HASH_ALGORITHM,
    chunk_size: int = FILE_HASH_CHUNK_SIZE,
) -> str:
    """Return the hex digest of a file's contents."""
    with path.open("rb") as handle:
        return stream_digest(handle, algorithm=algorithm, chunk_size=chunk_size)
