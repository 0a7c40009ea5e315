"""Result records produced by a scan."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one incremental scan.

    ``processed_files`` counts checksums that differ from the previous
    manifest; ``hashed_files`` counts every stale file hashed successfully.
    """

    root: Path
    output: Path
    marker: Path
    changed: bool
    needed_update: bool
    written: bool
    checked_files: int
    hashed_files: int
    processed_files: int
    failed_files: int
    pruned_files: int
    manifest: Mapping[str, str]
    processing_seconds: float
    duration_seconds: float
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def entries(self) -> int:
        """Number of entries in the final manifest."""
        return len(self.manifest)
