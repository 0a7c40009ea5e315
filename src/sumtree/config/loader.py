"""Config loading and normalization for sumtree scans."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from sumtree.config.model import SumtreeConfig
from sumtree.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_DUMP_MANIFEST,
    DEFAULT_MARKER_FILENAME,
    DEFAULT_PRUNE_MISSING,
)
from sumtree.exceptions import ConfigError


def resolve_config_path(root: Path, config_path: Path | None = None) -> Path:
    """Return the explicit config path, or ``sumtree.yaml`` inside *root*."""
    return config_path.resolve() if config_path else (root.resolve() / CONFIG_FILENAME)


def load_config(root: Path, config_path: Path | None = None) -> SumtreeConfig:
    """Load and validate scan config from ``sumtree.yaml`` or an explicit path."""
    path = resolve_config_path(root, config_path)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SumtreeConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(
            f"Unknown config key(s) in {path}: {', '.join(unknown)}. "
            f"Valid keys: {', '.join(sorted(ALLOWED_CONFIG_KEYS))}"
        )

    marker_filename = raw.get("marker_filename", DEFAULT_MARKER_FILENAME)
    if not isinstance(marker_filename, str) or not marker_filename.strip():
        raise ConfigError("marker_filename must be a non-empty string")
    if "/" in marker_filename or "\\" in marker_filename or marker_filename in {".", ".."}:
        raise ConfigError("marker_filename must be a plain file name")

    chunk_size = raw.get("chunk_size", DEFAULT_CHUNK_SIZE)
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ConfigError("chunk_size must be a positive integer")

    return SumtreeConfig(
        marker_filename=marker_filename,
        chunk_size=chunk_size,
        prune_missing=_ensure_bool(raw.get("prune_missing", DEFAULT_PRUNE_MISSING), "prune_missing"),
        dump_manifest=_ensure_bool(raw.get("dump_manifest", DEFAULT_DUMP_MANIFEST), "dump_manifest"),
    )


def _ensure_bool(value: Any, key_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value
