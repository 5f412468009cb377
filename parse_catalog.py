#!/usr/bin/env python3
"""
Catalog Feed Parser

Parses a tab-delimited vendor catalog and prints a summary.

Usage:
    python3 parse_catalog.py data/catalog.txt
    python3 parse_catalog.py data/catalog.txt --output output/catalog.csv --validate
"""

import sys

from catalog_feed.cli import main

if __name__ == "__main__":
    sys.exit(main())
