"""Preflight problems reported before a scan starts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A path or config problem, keyed by a stable code and the CLI option it concerns."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Render as ``[CODE] --option: message (hint)``."""
        text = f"[{self.code}] --{self.field}: {self.message}" if self.field else f"[{self.code}] {self.message}"
        return f"{text} ({self.hint})" if self.hint else text


def ordered(errors: list[ValidationError]) -> list[ValidationError]:
    """Return errors ordered by code, then path, then field."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    """One line per error, in ``ordered`` order."""
    return "\n".join(error.format() for error in ordered(errors))
