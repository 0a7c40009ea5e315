"""Read and write checksum manifests in ``<checksum>  <path>`` form."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from sumtree.constants.manifest import (
    MANIFEST_ENCODING,
    MANIFEST_ENCODING_ERRORS,
    MANIFEST_SEPARATOR,
    MANIFEST_TEMP_PREFIX,
    MANIFEST_TEMP_SUFFIX,
)
from sumtree.exceptions import ManifestWriteError
from sumtree.io import write_text_atomic
from sumtree.types import Manifest

logger = logging.getLogger(__name__)


def load_manifest(path: Path) -> Manifest:
    """Load a manifest file, returning an empty manifest if it is missing or unreadable."""
    try:
        text = path.read_text(encoding=MANIFEST_ENCODING, errors=MANIFEST_ENCODING_ERRORS)
    except OSError as exc:
        logger.debug("No usable manifest at %s: %s", path, exc)
        return {}
    return parse_manifest(text.split("\n"))


def parse_manifest(lines: Iterable[str]) -> Manifest:
    """Parse manifest lines; lines without the two-space separator are ignored."""
    entries: Manifest = {}
    for raw_line in lines:
        parts = raw_line.strip().split(MANIFEST_SEPARATOR, 1)
        if len(parts) == 2:
            checksum, rel_path = parts
            entries[rel_path] = checksum
    return entries


def render_manifest(manifest: Mapping[str, str]) -> str:
    """Render entries sorted by path in byte order, one newline-terminated line each."""
    return "".join(
        f"{manifest[rel_path]}{MANIFEST_SEPARATOR}{rel_path}\n" for rel_path in sorted(manifest, key=_byte_order_key)
    )


def save_manifest(path: Path, manifest: Mapping[str, str]) -> None:
    """Persist a manifest atomically, replacing any existing file at *path*."""
    try:
        write_text_atomic(
            path=path,
            text=render_manifest(manifest),
            temp_prefix=MANIFEST_TEMP_PREFIX,
            temp_suffix=MANIFEST_TEMP_SUFFIX,
            encoding=MANIFEST_ENCODING,
            errors=MANIFEST_ENCODING_ERRORS,
        )
    except OSError as exc:
        raise ManifestWriteError(f"Failed to write manifest: {path} ({exc})") from exc


def _byte_order_key(rel_path: str) -> bytes:
    return rel_path.encode(MANIFEST_ENCODING, MANIFEST_ENCODING_ERRORS)
