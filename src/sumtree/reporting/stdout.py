"""Plain-text stdout reporter for scan results."""

from __future__ import annotations

from sumtree.constants.branding import SCAN_SUMMARY_TITLE, UPDATED_MANIFEST_TITLE
from sumtree.constants.manifest import MANIFEST_ENCODING, MANIFEST_ENCODING_ERRORS
from sumtree.manifest import render_manifest
from sumtree.model import ScanResult


class StdoutReporter:
    """Formats a scan result as human-readable stdout output."""

    def __init__(self, result: ScanResult, *, dump_manifest: bool = True, verbose: bool = False) -> None:
        """Initialise the reporter."""
        self._result = result
        self._dump_manifest = dump_manifest
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections: list[str] = []
        if self._result.written and self._dump_manifest:
            sections.append(self._render_manifest())
        sections.append(self._render_summary())
        return _printable("\n".join(section for section in sections if section))

    def _render_manifest(self) -> str:
        return f"{UPDATED_MANIFEST_TITLE}\n{render_manifest(self._result.manifest)}"

    def _render_summary(self) -> str:
        r = self._result
        status = "manifest updated" if r.written else "no changes detected"
        lines = [
            SCAN_SUMMARY_TITLE,
            f"  Status      {status}",
            f"  Output      {r.output}",
            f"  Files       {r.checked_files} checked / {r.hashed_files} hashed / {r.processed_files} changed",
            f"  Entries     {r.entries}",
        ]
        if r.pruned_files:
            lines.append(f"  Pruned      {r.pruned_files}")
        if r.failed_files:
            lines.append(f"  Failures    {r.failed_files}")
        lines.append(f"  Duration    {r.processing_seconds:.3f}s processing / {r.duration_seconds:.3f}s total")

        if self._verbose and r.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  - {warning}" for warning in r.warnings)
        return "\n".join(lines)


def _printable(text: str) -> str:
    """Replace undecodable filename bytes with ``\\xNN`` escapes for terminal output."""
    return text.encode(MANIFEST_ENCODING, MANIFEST_ENCODING_ERRORS).decode(MANIFEST_ENCODING, "backslashreplace")
