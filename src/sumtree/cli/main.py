"""CLI entrypoint for sumtree."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from sumtree import __version__
from sumtree.config import load_config
from sumtree.constants.branding import CLI_DESCRIPTION
from sumtree.constants.manifest import DEFAULT_OUTPUT_FILENAME
from sumtree.exceptions import ConfigError, SumtreeError
from sumtree.exceptions.validation import format_errors
from sumtree.reporting import StdoutReporter
from sumtree.scanner import scan_tree
from sumtree.validation import preflight_validate


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="sumtree", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-d", "--dir", type=Path, default=Path("."), help="Directory to process (default: .)")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path(DEFAULT_OUTPUT_FILENAME),
        help=f"Output file path (default: {DEFAULT_OUTPUT_FILENAME})",
    )
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument(
        "--prune-missing",
        action="store_true",
        default=None,
        help="Drop manifest entries for files that no longer exist",
    )
    parser.add_argument("--no-dump", action="store_true", help="Do not print the updated manifest")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument("-v", "--verbose", action="store_true", help="List per-file warnings in the summary")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    validation_errors = preflight_validate(root=args.dir, output=args.output, config_path=args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        config = load_config(args.dir, args.config)
        if args.prune_missing is not None:
            config = replace(config, prune_missing=args.prune_missing)
        if args.no_dump:
            config = replace(config, dump_manifest=False)

        result = scan_tree(root=args.dir, output=args.output, config=config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SumtreeError as exc:
        print(f"Scan error: {exc}", file=sys.stderr)
        return 1

    reporter = StdoutReporter(result, dump_manifest=config.dump_manifest, verbose=args.verbose)
    print(reporter.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
