"""
Catalog item data model.

One normalized product record per non-blank feed line.
"""

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Dict


@dataclass(frozen=True)
class CatalogItem:
    """
    Normalized product record parsed from a vendor catalog feed.

    Prices are exact decimals. `managed` is never derived from the feed;
    it is reserved for downstream curation and is always False here.
    """

    upc: str
    category_1: str
    brand: str
    category_2: str
    standard_price: Decimal     # Retail price (wholesale * 2 when feed has 0)
    wholesale_cost: Decimal     # Supplier cost, 0 when missing/unparsable
    name: str
    managed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Return the item as a plain dict in field order."""
        return asdict(self)
