"""Preflight validation orchestrator.

Collects every path and config problem before a scan starts so the CLI can
report them together instead of failing on the first one.
"""

from __future__ import annotations

from pathlib import Path

from sumtree.config import load_config, resolve_config_path
from sumtree.constants.validation import CFG001, CFG002, PTH001, PTH002, PTH003, PTH004
from sumtree.exceptions import ConfigError
from sumtree.exceptions.validation import ValidationError, ordered


def preflight_validate(
    root: Path,
    output: Path,
    config_path: Path | None = None,
) -> list[ValidationError]:
    """Run all preflight checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    errors: list[ValidationError] = []
    resolved_root = root.resolve()
    if not resolved_root.exists():
        errors.append(
            ValidationError(
                code=PTH001,
                path=str(resolved_root),
                field="dir",
                message=f"directory does not exist: {resolved_root}",
            )
        )
    elif not resolved_root.is_dir():
        errors.append(
            ValidationError(
                code=PTH002,
                path=str(resolved_root),
                field="dir",
                message=f"not a directory: {resolved_root}",
            )
        )

    errors.extend(_validate_output(output))

    if resolved_root.is_dir():
        errors.extend(_validate_config(resolved_root, config_path))
    return ordered(errors)


def _validate_output(output: Path) -> list[ValidationError]:
    resolved_output = output.resolve()
    if resolved_output.is_dir():
        return [
            ValidationError(
                code=PTH003,
                path=str(resolved_output),
                field="output",
                message=f"output path is a directory: {resolved_output}",
            )
        ]
    if not resolved_output.parent.is_dir():
        return [
            ValidationError(
                code=PTH004,
                path=str(resolved_output),
                field="output",
                message=f"output directory does not exist: {resolved_output.parent}",
                hint="create the directory or choose another --output",
            )
        ]
    return []


def _validate_config(root: Path, config_path: Path | None) -> list[ValidationError]:
    path = resolve_config_path(root, config_path)
    if config_path is not None and not path.exists():
        return [
            ValidationError(
                code=CFG001,
                path=str(path),
                field="config",
                message=f"config file not found: {path}",
            )
        ]
    try:
        load_config(root, config_path)
    except ConfigError as exc:
        return [
            ValidationError(
                code=CFG002,
                path=str(path),
                field="config",
                message=str(exc),
            )
        ]
    return []
