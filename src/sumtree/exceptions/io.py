"""Exceptions for fatal filesystem failures during a run."""

from __future__ import annotations

from sumtree.exceptions.base import SumtreeError


class ManifestWriteError(SumtreeError, OSError):
    """Raised when the manifest cannot be written or moved into place."""


class MarkerError(SumtreeError, OSError):
    """Raised when the run marker cannot be created or timestamped."""
