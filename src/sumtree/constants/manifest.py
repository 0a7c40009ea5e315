"""Constants used by manifest persistence and hashing."""

from __future__ import annotations

DEFAULT_OUTPUT_FILENAME: str = "md5sums.txt"
MANIFEST_SEPARATOR: str = "  "
MANIFEST_ENCODING: str = "utf-8"
# Undecodable filenames round-trip through the manifest unchanged.
MANIFEST_ENCODING_ERRORS: str = "surrogateescape"
MANIFEST_TEMP_PREFIX: str = ".sumtree-"
MANIFEST_TEMP_SUFFIX: str = ".tmp"

HASH_ALGORITHM: str = "md5"
FILE_HASH_CHUNK_SIZE: int = 8192

MARKER_FILENAME: str = ".md5sum-timestamp"
