"""Resolved scan configuration."""

from __future__ import annotations

from dataclasses import dataclass

from sumtree.constants.config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_DUMP_MANIFEST,
    DEFAULT_MARKER_FILENAME,
    DEFAULT_PRUNE_MISSING,
)


@dataclass(frozen=True)
class SumtreeConfig:
    """Resolved scanner config."""

    marker_filename: str = DEFAULT_MARKER_FILENAME
    chunk_size: int = DEFAULT_CHUNK_SIZE
    # Off by default: entries for deleted files stay in the manifest.
    prune_missing: bool = DEFAULT_PRUNE_MISSING
    dump_manifest: bool = DEFAULT_DUMP_MANIFEST
