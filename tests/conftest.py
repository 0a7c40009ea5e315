"""Shared pytest fixtures for scan trees and manifests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def tree_root(tmp_path: Path) -> Path:
    """Return an empty directory to scan, kept apart from the manifest."""
    root = tmp_path / "tree"
    root.mkdir()
    return root


@pytest.fixture()
def manifest_path(tmp_path: Path) -> Path:
    """Return the manifest location outside the scanned tree."""
    return tmp_path / "md5sums.txt"
