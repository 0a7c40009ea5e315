"""Reporting helpers for scan results."""

from .stdout import StdoutReporter

__all__ = ["StdoutReporter"]
