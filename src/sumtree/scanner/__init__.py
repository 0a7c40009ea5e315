"""Tree walking, run marker and incremental manifest updates."""

from __future__ import annotations

from .discovery import TreeFile, walk_tree
from .marker import get_last_run, update_last_run
from .orchestrator import scan_tree

__all__ = ["TreeFile", "get_last_run", "scan_tree", "update_last_run", "walk_tree"]
