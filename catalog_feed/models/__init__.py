"""
Data models for catalog feed parsing.

This module contains pure data classes with no business logic.
"""

from .catalog_item import CatalogItem

__all__ = ['CatalogItem']
