"""Shared exception hierarchy for sumtree."""

from __future__ import annotations

from .base import SumtreeError
from .config import ConfigError
from .io import ManifestWriteError, MarkerError

__all__ = [
    "ConfigError",
    "ManifestWriteError",
    "MarkerError",
    "SumtreeError",
]
