"""Merging and ordering of models across catalog documents."""

from __future__ import annotations

from collections.abc import Iterable

from catalog_gen.catalog.models import Catalog, CatalogModel


def merge_models(catalogs: Iterable[Catalog]) -> list[CatalogModel]:
    """Concatenate the models of every catalog in document order."""
    models: list[CatalogModel] = []
    for catalog in catalogs:
        models.extend(catalog.models)
    return models


def sort_models(models: Iterable[CatalogModel]) -> list[CatalogModel]:
    """Sort models by case-insensitive id.

    Duplicate ids are kept in encounter order.
    """
    return sorted(models, key=lambda m: m.id.lower())


def aggregate(catalogs: Iterable[Catalog]) -> list[CatalogModel]:
    """Flatten and sort the models of all catalogs."""
    return sort_models(merge_models(catalogs))
