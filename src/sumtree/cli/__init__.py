"""Command-line interface for sumtree."""
