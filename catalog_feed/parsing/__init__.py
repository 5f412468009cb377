"""
Catalog feed parsing.

Modules:
    raw_row        - RawRow, tolerant fixed-position column access
    amounts        - Price/cost coercion and the zero-price fallback
    catalog_parser - CatalogParser and module-level parse helpers
"""

from .amounts import is_unusable_amount, parse_amount, resolve_standard_price
from .catalog_parser import CatalogParser, parse_catalog, parse_catalog_async
from .raw_row import RawRow

__all__ = [
    'RawRow',
    'parse_amount',
    'is_unusable_amount',
    'resolve_standard_price',
    'CatalogParser',
    'parse_catalog',
    'parse_catalog_async',
]
