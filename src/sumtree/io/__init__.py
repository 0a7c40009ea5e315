"""Shared file I/O helpers."""

from .files import file_digest, stream_digest
from .text_io import write_text_atomic

__all__ = ["file_digest", "stream_digest", "write_text_atomic"]
