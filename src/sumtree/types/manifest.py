"""Manifest type aliases."""

from __future__ import annotations

from typing import TypeAlias

# Relative POSIX path -> lowercase hex checksum.
Manifest: TypeAlias = dict[str, str]
