"""Directory traversal for regular files under a scan root."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeFile:
    """A regular file found under the scan root."""

    path: Path
    rel_path: str
    mtime_ns: int


def walk_tree(root: Path, *, warnings: list[str]) -> Iterator[TreeFile]:
    """Yield regular files under *root* in sorted order.

    Directories are descended but never yielded; symlinked directories are not
    followed. Entries that cannot be listed, stat'ed or made relative are
    logged, appended to *warnings* and skipped.
    """

    def _on_walk_error(exc: OSError) -> None:
        _warn(warnings, f"Failed to read directory: {exc.filename} ({exc.strerror or exc})")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_walk_error):
        dirnames.sort()
        directory = Path(dirpath)
        for name in sorted(filenames):
            path = directory / name
            rel_path = relative_key(path, root)
            if rel_path is None:
                _warn(warnings, f"Relative path error: {path}")
                continue

            try:
                info = path.stat()
            except OSError as exc:
                _warn(warnings, f"Failed to read file metadata: {rel_path} ({exc})")
                continue

            if not stat.S_ISREG(info.st_mode):
                logger.debug("Skipping non-regular file: %s", rel_path)
                continue

            yield TreeFile(path=path, rel_path=rel_path, mtime_ns=info.st_mtime_ns)


def relative_key(path: Path, root: Path) -> str | None:
    """Return the manifest key for *path*: its POSIX path relative to *root*."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return None


def _warn(warnings: list[str], message: str) -> None:
    warnings.append(message)
    logger.warning(message)
