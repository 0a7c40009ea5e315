"""Shared constants for sumtree."""
