"""
Project exceptions.

Per-row data problems in a catalog feed are never raised; these cover
boundary violations and configuration failures only.
"""


class CatalogFeedError(Exception):
    """Base class for catalog feed errors."""


class InvalidInputError(CatalogFeedError, TypeError):
    """Raised when the parser is given something that is not text."""


class ConfigError(CatalogFeedError):
    """Raised when a configuration file is malformed."""
