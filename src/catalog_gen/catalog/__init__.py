"""Catalog documents: models, loading and aggregation."""

from catalog_gen.catalog.aggregation import aggregate, merge_models, sort_models
from catalog_gen.catalog.loader import discover_catalog_files, load_catalog, load_catalogs
from catalog_gen.catalog.models import (
    Catalog,
    CatalogModel,
    ModelCapabilities,
    ModelConfig,
    ModelFile,
    ModelFiles,
    ModelMetadata,
)

__all__ = [
    "Catalog",
    "CatalogModel",
    "ModelCapabilities",
    "ModelConfig",
    "ModelFile",
    "ModelFiles",
    "ModelMetadata",
    "aggregate",
    "discover_catalog_files",
    "load_catalog",
    "load_catalogs",
    "merge_models",
    "sort_models",
]
