"""Discovery and parsing of catalog YAML documents."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from catalog_gen.catalog.models import Catalog
from catalog_gen.utils.errors import CatalogListError, CatalogParseError

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "*.yaml"


def discover_catalog_files(directory: Path | str, pattern: str = DEFAULT_PATTERN) -> list[Path]:
    """List catalog documents in a directory.

    Args:
        directory: Directory holding the catalog documents.
        pattern: Glob pattern the document names must match.

    Returns:
        Matching regular files, sorted by name.

    Raises:
        CatalogListError: If the directory is missing or cannot be listed.
    """
    path = Path(directory)
    if not path.is_dir():
        raise CatalogListError(path, "not a directory")

    try:
        files = [p for p in path.glob(pattern) if p.is_file()]
    except OSError as e:
        raise CatalogListError(path, str(e)) from e

    return sorted(files)


def load_catalog(path: Path | str) -> Catalog:
    """Read and parse a single catalog document.

    Raises:
        CatalogParseError: If the file cannot be read, is not valid YAML,
            or does not match the catalog schema.
    """
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogParseError(path, str(e)) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogParseError(path, f"invalid YAML: {e}") from e

    if data is None:
        logger.warning(f"Catalog {path} is empty")
        return Catalog()

    if not isinstance(data, dict):
        raise CatalogParseError(path, f"expected a mapping, got {type(data).__name__}")

    try:
        return Catalog.model_validate(data)
    except ValidationError as e:
        raise CatalogParseError(path, str(e)) from e


def load_catalogs(directory: Path | str, pattern: str = DEFAULT_PATTERN) -> list[Catalog]:
    """Load every catalog document in a directory.

    Stops at the first document that fails to load; nothing is skipped.
    """
    catalogs: list[Catalog] = []
    for path in discover_catalog_files(directory, pattern):
        catalog = load_catalog(path)
        logger.debug(f"Loaded {len(catalog.models)} models from {path} (catalog={catalog.catalog!r})")
        catalogs.append(catalog)
    return catalogs
