"""Utility helpers for catalog-gen."""

from catalog_gen.utils.errors import (
    CatalogGenError,
    CatalogListError,
    CatalogParseError,
    CatalogWriteError,
)

__all__ = [
    "CatalogGenError",
    "CatalogListError",
    "CatalogParseError",
    "CatalogWriteError",
]
