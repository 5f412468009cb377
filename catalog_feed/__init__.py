"""
Catalog Feed Parser

Converts a vendor tab-delimited product catalog into normalized records.

Modules:
    models      - Data models (CatalogItem)
    common      - Shared utilities (constants, config loader, logging, CSV utils)
    parsing     - Catalog feed parsing (RawRow, amount coercion, CatalogParser)
    validation  - Advisory checks on parsed items before import
    export      - CSV export of parsed items
"""

from .errors import CatalogFeedError, ConfigError, InvalidInputError
from .models import CatalogItem
from .parsing import CatalogParser, parse_catalog, parse_catalog_async

__all__ = [
    'CatalogItem',
    'CatalogParser',
    'parse_catalog',
    'parse_catalog_async',
    'CatalogFeedError',
    'ConfigError',
    'InvalidInputError',
]
