"""Shared test fixtures."""

from decimal import Decimal

import pytest

from catalog_feed.common.constants import FEED_COLUMN_COUNT, FEED_COLUMNS
from catalog_feed.models import CatalogItem


def build_row(**fields) -> str:
    """Build a full 24-column feed line with the named fields populated."""
    cols = [""] * FEED_COLUMN_COUNT
    for name, value in fields.items():
        cols[FEED_COLUMNS[name]] = value
    return "\t".join(cols)


@pytest.fixture
def make_row():
    """Return the feed line builder."""
    return build_row


@pytest.fixture
def roadster_row():
    return build_row(
        upc="123456",
        category_1="Bikes",
        brand="Acme",
        category_2="Road",
        standard_price="10.5",
        wholesale_cost="4.25",
        name="Acme Roadster",
    )


@pytest.fixture
def valid_item():
    """An item that passes every validation rule."""
    return CatalogItem(
        upc="012345678905",
        category_1="Components",
        brand="Shimano",
        category_2="Chains",
        standard_price=Decimal("39.99"),
        wholesale_cost=Decimal("18.50"),
        name="CN-HG601 11-Speed Chain",
    )
