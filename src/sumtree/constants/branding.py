"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "sumtree"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: incremental MD5 manifests for a directory tree"
SCAN_SUMMARY_TITLE: str = "Scan summary"
UPDATED_MANIFEST_TITLE: str = "Updated checksums:"
