"""Manifest persistence."""

from .store import load_manifest, parse_manifest, render_manifest, save_manifest

__all__ = ["load_manifest", "parse_manifest", "render_manifest", "save_manifest"]
