"""CSV export of parsed catalog items."""

from .csv_exporter import CATALOG_FIELDNAMES, CatalogCSVExporter

__all__ = ['CatalogCSVExporter', 'CATALOG_FIELDNAMES']
