"""
Catalog feed command-line entry point.

Reads a vendor catalog file, parses it and prints a summary. Optionally
writes the parsed items to CSV, dumps them as JSON or prints a
validation summary.

Usage:
    python3 parse_catalog.py data/catalog.txt
    python3 parse_catalog.py data/catalog.txt --output output/catalog.csv
    python3 parse_catalog.py data/catalog.txt --validate --verbose
    CATALOG_FILE=data/catalog.txt python3 parse_catalog.py --json
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from dotenv import load_dotenv

from .common.config_loader import load_config, load_export_settings, load_validation_rules
from .common.log_config import setup_logging
from .export import CatalogCSVExporter
from .models import CatalogItem
from .parsing import parse_catalog
from .validation import summarize_validation

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse a tab-delimited vendor catalog feed"
    )
    parser.add_argument(
        "catalog",
        nargs="?",
        default=os.environ.get("CATALOG_FILE"),
        help="Catalog file path (default: $CATALOG_FILE)"
    )
    parser.add_argument(
        "--encoding",
        default=os.environ.get("CATALOG_ENCODING", "utf-8"),
        help="Catalog file encoding (default: $CATALOG_ENCODING or utf-8)"
    )
    parser.add_argument(
        "--output",
        help="Write parsed items to this CSV path"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print parsed items as JSON to stdout"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Print a validation summary for the parsed items"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("--quiet", action="store_true", help="Warnings and errors only")
    return parser


def read_catalog(path: str | Path, encoding: str = "utf-8") -> str:
    """Read the whole catalog file as text. Decoding errors propagate."""
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def _load_settings() -> Tuple[Dict[str, Any], Dict[str, Any]]:
    try:
        config = load_config()
    except FileNotFoundError as e:
        logger.debug("Using built-in defaults: %s", e)
        config = {}
    return load_validation_rules(config), load_export_settings(config)


def print_summary(items: List[CatalogItem], source: str) -> None:
    zero_priced = sum(1 for item in items if item.standard_price == 0)
    print(f"Catalog: {source}")
    print(f"  Items parsed:        {len(items)}")
    print(f"  Items at zero price: {zero_priced}")


def print_validation(summary: dict) -> None:
    print("\nValidation:")
    print(f"  Valid:          {summary['valid']}/{summary['total']}")
    print(f"  Invalid:        {summary['invalid']}")
    print(f"  With warnings:  {summary['warnings']}")
    for field_name, count in sorted(summary['error_counts'].items()):
        print(f"    {field_name:12} {count} error(s)")


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet)

    if not args.catalog:
        parser.print_usage(sys.stderr)
        print("error: no catalog file given and CATALOG_FILE is not set", file=sys.stderr)
        return EXIT_USAGE

    try:
        raw_text = read_catalog(args.catalog, args.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read catalog %s: %s", args.catalog, e)
        return EXIT_IO_ERROR

    items = parse_catalog(raw_text)
    validation_rules, export_settings = _load_settings()

    if args.json:
        json.dump([item.to_dict() for item in items], sys.stdout, indent=2, ensure_ascii=False, default=str)
        print()
    else:
        print_summary(items, args.catalog)

    if args.validate:
        print_validation(summarize_validation(items, validation_rules))

    if args.output:
        exporter = CatalogCSVExporter(
            price_places=export_settings['price_places'],
            encoding=export_settings['encoding'],
        )
        output_path = Path(args.output)
        try:
            exporter.export(items, output_path)
        except OSError as e:
            logger.error("Cannot write %s: %s", output_path, e)
            return EXIT_IO_ERROR

    return EXIT_OK
