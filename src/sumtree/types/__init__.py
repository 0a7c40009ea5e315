"""Shared type aliases for sumtree."""

from .manifest import Manifest

__all__ = ["Manifest"]
