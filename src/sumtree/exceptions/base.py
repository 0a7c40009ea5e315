"""Base exception for sumtree."""

from __future__ import annotations


class SumtreeError(Exception):
    """Base class for all errors raised by sumtree."""
