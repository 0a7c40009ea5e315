"""Core data models for sumtree."""

from .entities import ScanResult

__all__ = ["ScanResult"]
