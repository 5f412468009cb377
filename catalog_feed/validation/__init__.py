"""Advisory validation of parsed catalog items."""

from .item_validator import CatalogItemValidator, summarize_validation

__all__ = ['CatalogItemValidator', 'summarize_validation']
