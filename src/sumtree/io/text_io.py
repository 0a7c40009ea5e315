"""Text write helper with atomic persistence."""

from __future__ import annotations

import os
import stat
import tempfile
from contextlib import suppress
from pathlib import Path

DEFAULT_FILE_MODE: int = 0o666


def write_text_atomic(
    *,
    path: Path,
    text: str,
    temp_prefix: str,
    temp_suffix: str,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> None:
    """Persist text atomically by writing to a temp file then renaming.

    The temp file is created next to *path* so the final ``os.replace`` stays
    on one filesystem. Readers see either the previous file or the new one.
    The published file keeps the mode of the file it replaces; a new file gets
    ``0o666`` minus the process umask, as a plain ``open(path, "w")`` would.
    """
    mode = _publish_mode(path)
    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding=encoding,
            errors=errors,
            newline="\n",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(text)
        os.chmod(temp_name, mode)
        os.replace(temp_name, path)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise


def _publish_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except OSError:
        pass
    # os.umask has no read-only form; set and restore.
    umask = os.umask(0)
    os.umask(umask)
    return DEFAULT_FILE_MODE & ~umask
