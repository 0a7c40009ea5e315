"""Configuration-related exceptions."""

from __future__ import annotations

from sumtree.exceptions.base import SumtreeError


class ConfigError(SumtreeError, ValueError):
    """Raised when scan paths or configuration are invalid."""
