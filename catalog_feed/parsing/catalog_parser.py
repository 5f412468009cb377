"""
Catalog Feed Parser

Turns the raw text of a tab-delimited vendor catalog into CatalogItem
records. No header row, fixed 24-column layout, one item per non-blank
line in input order.

Usage:
    items = parse_catalog(text)
    items = await parse_catalog_async(text)
"""

import logging
from typing import List

from ..common.constants import (
    COL_BRAND,
    COL_CATEGORY_1,
    COL_CATEGORY_2,
    COL_NAME,
    COL_STANDARD_PRICE,
    COL_UPC,
    COL_WHOLESALE_COST,
)
from ..errors import InvalidInputError
from ..models import CatalogItem
from .amounts import is_unusable_amount, parse_amount, resolve_standard_price
from .raw_row import RawRow

logger = logging.getLogger(__name__)


def _require_text(value) -> None:
    if not isinstance(value, str):
        raise InvalidInputError(
            f"Catalog feed must be text, got {type(value).__name__}"
        )


class CatalogParser:
    """
    Stateless parser for the vendor catalog feed.

    The instance holds no per-call state, so a single parser can be
    shared between concurrent callers.
    """

    def parse_line(self, line: str) -> CatalogItem:
        """Parse one non-blank feed line into a CatalogItem."""
        _require_text(line)
        return self._item_from_row(RawRow.from_line(line))

    def parse(self, raw_text: str) -> List[CatalogItem]:
        """
        Parse an entire feed.

        Args:
            raw_text: Full file content, newline-separated rows

        Returns:
            One CatalogItem per non-blank line, in input order

        Raises:
            InvalidInputError: If raw_text is not a str
        """
        _require_text(raw_text)

        items: List[CatalogItem] = []
        short_rows = 0
        coerced = 0

        for line in raw_text.split('\n'):
            if not line.strip():
                continue

            row = RawRow.from_line(line)
            if row.is_short:
                short_rows += 1
            for index in (COL_STANDARD_PRICE, COL_WHOLESALE_COST):
                if is_unusable_amount(row[index]):
                    coerced += 1

            items.append(self._item_from_row(row))

        logger.debug(
            "Parsed %d catalog items (%d short rows padded, %d amounts coerced to 0)",
            len(items), short_rows, coerced,
        )
        return items

    async def parse_async(self, raw_text: str) -> List[CatalogItem]:
        """Awaitable form of parse() for I/O-oriented callers."""
        return self.parse(raw_text)

    def _item_from_row(self, row: RawRow) -> CatalogItem:
        wholesale_cost = parse_amount(row[COL_WHOLESALE_COST])
        standard_price = resolve_standard_price(
            parse_amount(row[COL_STANDARD_PRICE]), wholesale_cost
        )

        return CatalogItem(
            upc=row[COL_UPC],
            category_1=row[COL_CATEGORY_1],
            brand=row[COL_BRAND],
            category_2=row[COL_CATEGORY_2],
            standard_price=standard_price,
            wholesale_cost=wholesale_cost,
            name=row[COL_NAME],
            managed=False,
        )


_default_parser = CatalogParser()


def parse_catalog(raw_text: str) -> List[CatalogItem]:
    """Parse a catalog feed with the shared parser."""
    return _default_parser.parse(raw_text)


async def parse_catalog_async(raw_text: str) -> List[CatalogItem]:
    """Awaitable parse_catalog()."""
    return await _default_parser.parse_async(raw_text)
