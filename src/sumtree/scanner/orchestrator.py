"""Incremental scan orchestration for sumtree.

``scan_tree`` rehashes only stale files, merges the results into a copy of the
previous manifest and writes the manifest back only when it changed.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from pathlib import Path

from sumtree.config import SumtreeConfig
from sumtree.exceptions import ConfigError
from sumtree.io import file_digest
from sumtree.manifest import load_manifest, save_manifest
from sumtree.model import ScanResult
from sumtree.scanner.discovery import TreeFile, walk_tree
from sumtree.scanner.marker import get_last_run, update_last_run
from sumtree.types import Manifest

logger = logging.getLogger(__name__)


def is_stale(tree_file: TreeFile, *, last_run_ns: int, existing: Mapping[str, str]) -> bool:
    """Return True when the file was modified after the last run or was never recorded."""
    return tree_file.mtime_ns > last_run_ns or tree_file.rel_path not in existing


def is_marker(rel_path: str, marker_filename: str) -> bool:
    """Return True for the run marker, which is never hashed or recorded."""
    return rel_path.endswith(marker_filename)


def scan_tree(
    *,
    root: Path,
    output: Path,
    config: SumtreeConfig | None = None,
) -> ScanResult:
    """Update the manifest at *output* with checksums of files under *root*."""
    started_at = time.perf_counter()
    config = config if config is not None else SumtreeConfig()
    root = root.resolve()
    output = output.resolve()

    if not root.is_dir():
        raise ConfigError(f"Directory does not exist or is not a directory: {root}")
    if output.is_dir():
        raise ConfigError(f"Output path is a directory: {output}")

    existing = load_manifest(output)
    current: Manifest = dict(existing)

    marker_path = root / config.marker_filename
    last_run_ns = get_last_run(marker_path)

    warnings: list[str] = []
    visited: set[str] = set()
    changed = False
    needed_update = False
    hashed_files = 0
    processed_files = 0
    processing_started_at = time.perf_counter()

    for tree_file in walk_tree(root, warnings=warnings):
        rel_path = tree_file.rel_path
        logger.info("Checking %s", rel_path)

        if is_marker(rel_path, config.marker_filename):
            logger.info("Skipping run marker: %s", rel_path)
            continue
        visited.add(rel_path)

        if not is_stale(tree_file, last_run_ns=last_run_ns, existing=existing):
            continue

        try:
            checksum = file_digest(tree_file.path, chunk_size=config.chunk_size)
        except OSError as exc:
            warning = f"Checksum failed: {rel_path} ({exc})"
            warnings.append(warning)
            logger.warning(warning)
            continue

        hashed_files += 1
        needed_update = True
        if existing.get(rel_path) != checksum:
            changed = True
            current[rel_path] = checksum
            processed_files += 1

    pruned_files = 0
    if config.prune_missing:
        pruned_files = prune_missing_entries(current, root=root, visited=visited)

    processing_seconds = time.perf_counter() - processing_started_at
    written = changed or current != existing

    if written:
        save_manifest(output, current)
        update_last_run(marker_path)
        logger.info("Processed %d files in %.3fs", processed_files, processing_seconds)
    else:
        logger.info("No changes detected. Existing file preserved: %s", output)
        if needed_update:
            update_last_run(marker_path)

    duration_seconds = time.perf_counter() - started_at
    logger.info("Total duration: %.3fs | Entries: %d", duration_seconds, len(current))

    return ScanResult(
        root=root,
        output=output,
        marker=marker_path,
        changed=changed,
        needed_update=needed_update,
        written=written,
        checked_files=len(visited),
        hashed_files=hashed_files,
        processed_files=processed_files,
        failed_files=len(warnings),
        pruned_files=pruned_files,
        manifest=current,
        processing_seconds=processing_seconds,
        duration_seconds=duration_seconds,
        warnings=tuple(warnings),
    )


def prune_missing_entries(current: Manifest, *, root: Path, visited: set[str]) -> int:
    """Drop entries for files that no longer exist under *root*.

    Entries the walk did not reach for other reasons (unreadable directories,
    permission errors) are kept. Returns the number of entries removed.
    """
    pruned = 0
    for rel_path in sorted(set(current) - visited):
        try:
            (root / rel_path).lstat()
        except (FileNotFoundError, NotADirectoryError):
            del current[rel_path]
            pruned += 1
            logger.info("Pruned missing file: %s", rel_path)
        except OSError as exc:
            logger.debug("Keeping unreachable entry %s: %s", rel_path, exc)
    return pruned
