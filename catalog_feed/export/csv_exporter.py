"""
Catalog CSV Exporter

Writes parsed catalog items to a flat CSV with a header row, for review
or for loading into other tools.
"""

import logging
from decimal import Decimal, localcontext
from pathlib import Path
from typing import Dict, Iterable

from ..common.csv_utils import write_csv
from ..models import CatalogItem

logger = logging.getLogger(__name__)

CATALOG_FIELDNAMES = [
    'upc', 'name', 'brand', 'category_1', 'category_2',
    'standard_price', 'wholesale_cost', 'managed',
]


class CatalogCSVExporter:
    """
    Exports catalog items to CSV.

    Usage:
        exporter = CatalogCSVExporter()
        exporter.export(items, "output/catalog.csv")
    """

    def __init__(self, price_places: int = 2, encoding: str = 'utf-8'):
        """
        Initialize the exporter.

        Args:
            price_places: Decimal places for price columns
            encoding: Output file encoding
        """
        self.fieldnames = CATALOG_FIELDNAMES
        self.encoding = encoding
        self.price_places = price_places
        self._quantum = Decimal(1).scaleb(-price_places)

    def format_amount(self, amount: Decimal) -> str:
        if not amount.is_finite():
            return str(amount)
        # Enough precision for every integer digit plus the price places
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, amount.adjusted() + self.price_places + 2)
            return str(amount.quantize(self._quantum))

    def item_to_row(self, item: CatalogItem) -> Dict[str, str]:
        """Convert an item to a CSV row."""
        return {
            'upc': item.upc,
            'name': item.name,
            'brand': item.brand,
            'category_1': item.category_1,
            'category_2': item.category_2,
            'standard_price': self.format_amount(item.standard_price),
            'wholesale_cost': self.format_amount(item.wholesale_cost),
            'managed': 'TRUE' if item.managed else 'FALSE',
        }

    def export(self, items: Iterable[CatalogItem], output_path: str | Path) -> int:
        """
        Export items to a CSV file.

        Args:
            items: Items to export
            output_path: Path to output CSV file (parent dirs are created)

        Returns:
            Number of item rows written; an empty list gives a header-only file
        """
        written = write_csv(
            output_path,
            (self.item_to_row(item) for item in items),
            fieldnames=self.fieldnames,
            encoding=self.encoding,
        )
        logger.info("Exported %d catalog items to %s", written, output_path)
        return written
