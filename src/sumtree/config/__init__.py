"""Configuration loading for sumtree scans."""

from __future__ import annotations

from .loader import load_config, resolve_config_path
from .model import SumtreeConfig

__all__ = ["SumtreeConfig", "load_config", "resolve_config_path"]
