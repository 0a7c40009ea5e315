"""Tests for preflight validation."""

from __future__ import annotations

from pathlib import Path

from sumtree.constants.validation import CFG001, CFG002, PTH001, PTH002, PTH003, PTH004
from sumtree.exceptions.validation import ValidationError, format_errors
from sumtree.validation import preflight_validate


def test_preflight_valid_paths(tree_root: Path, manifest_path: Path) -> None:
    assert preflight_validate(tree_root, manifest_path) == []


def test_preflight_missing_root(tmp_path: Path, manifest_path: Path) -> None:
    errors = preflight_validate(tmp_path / "missing", manifest_path)

    assert [error.code for error in errors] == [PTH001]


def test_preflight_root_is_file(tmp_path: Path, manifest_path: Path) -> None:
    root = tmp_path / "file.txt"
    root.write_text("x", encoding="utf-8")

    errors = preflight_validate(root, manifest_path)

    assert [error.code for error in errors] == [PTH002]


def test_preflight_output_is_directory(tree_root: Path, tmp_path: Path) -> None:
    errors = preflight_validate(tree_root, tmp_path)

    assert [error.code for error in errors] == [PTH003]


def test_preflight_collects_multiple_errors(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "missing", tmp_path / "no-dir" / "md5sums.txt")

    assert [error.code for error in errors] == [PTH001, PTH004]


def test_preflight_reports_config_problems(tree_root: Path, manifest_path: Path) -> None:
    (tree_root / "sumtree.yaml").write_text("chunk_size: -1\n", encoding="utf-8")

    errors = preflight_validate(tree_root, manifest_path)

    assert [error.code for error in errors] == [CFG002]
    assert "chunk_size" in errors[0].message


def test_preflight_missing_explicit_config(tree_root: Path, manifest_path: Path) -> None:
    errors = preflight_validate(tree_root, manifest_path, tree_root / "nope.yaml")

    assert [error.code for error in errors] == [CFG001]


def test_format_errors_is_sorted_and_includes_hint() -> None:
    errors = [
        ValidationError(code="PTH004", path="/b", field="output", message="missing parent", hint="create it"),
        ValidationError(code="PTH001", path="/a", field="dir", message="missing dir"),
    ]

    assert format_errors(errors) == "[PTH001] --dir: missing dir\n[PTH004] --output: missing parent (create it)"


def test_format_without_field() -> None:
    assert ValidationError(code="CFG002", path="/c", field="", message="bad config").format() == "[CFG002] bad config"
