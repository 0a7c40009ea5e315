"""Filesystem helpers shared by test modules."""

from __future__ import annotations

import os
from pathlib import Path


def write_file(root: Path, rel_path: str, content: bytes) -> Path:
    """Create *rel_path* under *root* with *content*, making parents as needed."""
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


def set_mtime_ns(path: Path, mtime_ns: int) -> None:
    """Set both atime and mtime of *path* to *mtime_ns*."""
    os.utime(path, ns=(mtime_ns, mtime_ns))
