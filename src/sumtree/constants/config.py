"""Configuration defaults and filenames."""

from __future__ import annotations

from sumtree.constants.manifest import FILE_HASH_CHUNK_SIZE, MARKER_FILENAME

CONFIG_FILENAME: str = "sumtree.yaml"

DEFAULT_MARKER_FILENAME: str = MARKER_FILENAME
DEFAULT_CHUNK_SIZE: int = FILE_HASH_CHUNK_SIZE
DEFAULT_PRUNE_MISSING: bool = False
DEFAULT_DUMP_MANIFEST: bool = True

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "chunk_size",
        "dump_manifest",
        "marker_filename",
        "prune_missing",
    }
)
