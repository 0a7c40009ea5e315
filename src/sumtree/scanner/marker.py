"""Run marker: the last completed scan, recorded as a marker file's mtime."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

from sumtree.exceptions import MarkerError

logger = logging.getLogger(__name__)


def get_last_run(path: Path) -> int:
    """Return the marker mtime in nanoseconds, or 0 when the marker is unavailable.

    A zero instant means every file is treated as stale.
    """
    try:
        return path.stat().st_mtime_ns
    except OSError:
        return 0


def update_last_run(path: Path) -> int:
    """Create or truncate the marker and stamp it with the current time.

    Returns the instant written, in nanoseconds. Raises ``MarkerError`` when the
    marker cannot be written, since later runs would make wrong staleness calls.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise MarkerError(f"Failed to create marker directory: {path.parent} ({exc})") from exc

    try:
        with path.open("wb"):
            pass
        now_ns = time.time_ns()
        os.utime(path, ns=(now_ns, now_ns))
    except OSError as exc:
        raise MarkerError(f"Failed to update run marker: {path} ({exc})") from exc

    logger.info("Updated last run: %s", path)
    return now_ns
