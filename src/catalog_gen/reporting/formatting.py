"""Cell formatting and markdown table rendering for the catalog report."""

from __future__ import annotations

import re
from datetime import datetime

from catalog_gen.catalog.models import ModelFiles

KB = 1024
MB = 1024 * KB
GB = 1024 * MB

CHECK_MARK = "✓"

# Rendered when a model has no creation timestamp.
ZERO_DATE = "0001-01-01"

_UNIT_BYTES = {
    "gb": GB,
    "mb": MB,
    "kb": KB,
    "kib": KB,
}

# Leading number, then an optional whitespace separated unit.
_SIZE_RE = re.compile(r"([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(\S*)")


def format_link(text: str, url: str) -> str:
    """Format a markdown link."""
    return f"[{text}]({url})"


def parse_size_to_bytes(size: str) -> float:
    """Convert a size such as ``"1.2 GB"`` to bytes.

    Units are matched case-insensitively. An unknown or missing unit means
    the number is already a byte count. A size without a leading number
    counts as zero instead of failing.
    """
    match = _SIZE_RE.match(size.strip())
    if not match:
        return 0.0

    value = float(match.group(1))
    return value * _UNIT_BYTES.get(match.group(2).lower(), 1)


def format_total_size(files: ModelFiles) -> str:
    """Sum the sizes of all model files plus the projector file."""
    total = sum(parse_size_to_bytes(f.size) for f in files.models)
    if files.proj is not None:
        total += parse_size_to_bytes(files.proj.size)

    if total >= GB:
        return f"{total / GB:.1f} GB"
    return f"{total / MB:.0f} MB"


def format_context_window(size: int) -> str:
    """Format a context window token count, ``-`` when unspecified."""
    if size == 0:
        return "-"
    if size >= KB:
        return f"{size // KB}K"
    return str(size)


def format_created(created: datetime | None) -> str:
    """Format a creation timestamp as YYYY-MM-DD."""
    if created is None:
        return ZERO_DATE
    return created.strftime("%Y-%m-%d")


def format_description(desc: str) -> str:
    """Collapse a description onto one line inside a collapsible block."""
    if desc == "":
        return ""

    desc = desc.strip().replace("\r\n", "\n").replace("\n", " ")
    return f"<details><summary>Show</summary>{desc}</details>"


def bool_to_mark(flag: bool) -> str:
    """Render a capability flag as a check mark, empty when unset."""
    return CHECK_MARK if flag else ""


def stack_label(label: str) -> str:
    """Stack the characters of a header label vertically."""
    return "<br>".join(label)


def format_table(
    headers: list[str],
    rows: list[list[str]],
    alignments: list[str] | None = None,
) -> str:
    """Render a GitHub flavoured markdown table.

    Args:
        headers: Column header strings.
        rows: List of row data (each row is a list of strings).
        alignments: Per-column alignment ('l', 'r', 'c'). Defaults to left.
    """
    if not headers:
        return ""

    num_cols = len(headers)
    if alignments is None:
        alignments = ["l"] * num_cols

    def _line(cells: list[str]) -> str:
        return "| " + " | ".join(cells) + " |"

    sep_parts = []
    for align in alignments:
        if align == "r":
            sep_parts.append("---:")
        elif align == "c":
            sep_parts.append(":---:")
        else:
            sep_parts.append("---")

    data_lines = [
        _line([row[i] if i < len(row) else "" for i in range(num_cols)]) for row in rows
    ]
    return "\n".join([_line(headers), "|" + "|".join(sep_parts) + "|", *data_lines])
