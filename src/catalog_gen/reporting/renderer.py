"""Rendering of the model catalog markdown document."""

from __future__ import annotations

import logging
from pathlib import Path

from catalog_gen.catalog.models import CatalogModel
from catalog_gen.reporting.formatting import (
    bool_to_mark,
    format_context_window,
    format_created,
    format_description,
    format_link,
    format_table,
    format_total_size,
    stack_label,
)
from catalog_gen.utils.errors import CatalogWriteError

logger = logging.getLogger(__name__)

TITLE = "# Model Catalog"

HEADERS = [
    "ID",
    "Category",
    "Owner",
    "Size",
    "Context",
    "Created",
    "Description",
    *[stack_label(label) for label in ("audio", "gated", "reason", "stream", "tool", "video")],
]
ALIGNMENTS = [*["l"] * 7, *["c"] * 6]


def format_model_row(model: CatalogModel) -> list[str]:
    """Format the table cells for one model."""
    caps = model.capabilities
    return [
        format_link(model.id, model.web_page),
        model.category,
        model.owned_by,
        format_total_size(model.files),
        format_context_window(model.config.context_window),
        format_created(model.metadata.created),
        format_description(model.metadata.description),
        bool_to_mark(caps.audio),
        bool_to_mark(model.gated_model),
        bool_to_mark(caps.reasoning),
        bool_to_mark(caps.streaming),
        bool_to_mark(caps.tooling),
        bool_to_mark(caps.video),
    ]


def render_catalog(models: list[CatalogModel]) -> str:
    """Render the full catalog document, one row per model in the given order."""
    rows = [format_model_row(m) for m in models]
    table = format_table(HEADERS, rows, ALIGNMENTS)
    return f"{TITLE}\n\n{table}\n"


def write_catalog(models: list[CatalogModel], path: Path | str) -> int:
    """Write the catalog document, replacing any existing file.

    Returns:
        Number of model rows written.

    Raises:
        CatalogWriteError: If the file cannot be written.
    """
    path = Path(path)
    content = render_catalog(models)
    try:
        path.write_text(content, encoding="utf-8", newline="\n")
    except OSError as e:
        raise CatalogWriteError(path, str(e)) from e

    logger.info(f"Wrote {len(models)} models to {path}")
    return len(models)
