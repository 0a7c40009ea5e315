"""Stable error codes for preflight validation."""

from __future__ import annotations

# Paths
PTH001: str = "PTH001"  # scan root does not exist
PTH002: str = "PTH002"  # scan root is not a directory
PTH003: str = "PTH003"  # output path is a directory
PTH004: str = "PTH004"  # output parent directory does not exist

# Config file
CFG001: str = "CFG001"  # explicit config file not found
CFG002: str = "CFG002"  # config could not be loaded
