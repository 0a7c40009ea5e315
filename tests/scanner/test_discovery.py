"""Tests for directory traversal."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from sumtree.scanner.discovery import relative_key, walk_tree
from tests.helpers import write_file


def test_walk_tree_yields_regular_files_with_posix_keys(tree_root: Path) -> None:
    write_file(tree_root, "b.txt", b"b")
    write_file(tree_root, "a/deep/c.txt", b"c")
    write_file(tree_root, "a/a.txt", b"a")
    (tree_root / "empty-dir").mkdir()
    warnings: list[str] = []

    found = list(walk_tree(tree_root, warnings=warnings))

    assert sorted(item.rel_path for item in found) == ["a/a.txt", "a/deep/c.txt", "b.txt"]
    assert all(item.path.is_file() for item in found)
    assert not warnings


def test_walk_tree_reports_file_mtime(tree_root: Path) -> None:
    path = write_file(tree_root, "a.txt", b"a")

    (found,) = walk_tree(tree_root, warnings=[])

    assert found.mtime_ns == path.stat().st_mtime_ns


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_walk_tree_does_not_follow_directory_symlinks(tree_root: Path, tmp_path: Path) -> None:
    outside = tmp_path / "outside"
    write_file(outside, "secret.txt", b"s")
    write_file(tree_root, "a.txt", b"a")
    (tree_root / "link").symlink_to(outside, target_is_directory=True)

    found = [item.rel_path for item in walk_tree(tree_root, warnings=[])]

    assert found == ["a.txt"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_walk_tree_warns_on_broken_symlink(tree_root: Path) -> None:
    write_file(tree_root, "a.txt", b"a")
    (tree_root / "dangling").symlink_to(tree_root / "missing.txt")
    warnings: list[str] = []

    found = [item.rel_path for item in walk_tree(tree_root, warnings=warnings)]

    assert found == ["a.txt"]
    assert len(warnings) == 1
    assert "dangling" in warnings[0]


def test_relative_key_outside_root_is_none(tmp_path: Path) -> None:
    assert relative_key(tmp_path / "x.txt", tmp_path / "other") is None
    assert relative_key(tmp_path / "a" / "b.txt", tmp_path) == "a/b.txt"


def test_walk_tree_warns_on_unlistable_directory(tree_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    write_file(tree_root, "a.txt", b"a")
    write_file(tree_root, "locked/hidden.txt", b"h")
    write_file(tree_root, "open/b.txt", b"b")
    locked = os.fspath(tree_root / "locked")
    real_scandir = os.scandir

    def _scandir(path=".", *args, **kwargs):  # type: ignore[no-untyped-def]
        if os.fspath(path) == locked:
            raise PermissionError(13, "Permission denied", locked)
        return real_scandir(path, *args, **kwargs)

    monkeypatch.setattr(os, "scandir", _scandir)
    warnings: list[str] = []

    found = [item.rel_path for item in walk_tree(tree_root, warnings=warnings)]

    assert found == ["a.txt", "open/b.txt"]
    assert len(warnings) == 1
    assert "Failed to read directory" in warnings[0]
    assert "locked" in warnings[0]
