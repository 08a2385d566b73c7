"""Plain-text document sink for exported orders.

Lays the export fields out the way the printed order reads: header lines,
a "Products:" block with one line per product, then the grand total.
"""

from __future__ import annotations

from itertools import groupby
from pathlib import Path

from orderdesk.domain.service.export_formatter import ExportField


def render_text(fields: list[ExportField]) -> list[str]:
    lines: list[str] = []

    header = [f for f in fields if f.section == "header"]
    for f in header:
        lines.append(f.value if f.label == "Title" else f"{f.label}: {f.value}")

    rows = [f for f in fields if f.section == "line"]
    if rows:
        lines.append("")
        lines.append("Products:")
        for _, group in groupby(rows, key=lambda f: f.row):
            cells = {f.label: f.value for f in group}
            lines.append(
                f"{cells['#']}. {cells['Product']}  "
                f"Price: {cells['Price']}  Qty: {cells['Qty']}  Total: {cells['Total']}"
            )

    footer = [f for f in fields if f.section == "footer"]
    if footer:
        lines.append("")
    for f in footer:
        lines.append(f"{f.label}: {f.value}")
    return lines


def export_file_name(fields: list[ExportField]) -> str:
    order_id = next(f.value for f in fields if f.label == "ID")
    return f"Order_{order_id}.txt"


def write_text_export(fields: list[ExportField], directory: Path) -> Path:
    """Write the rendered order into *directory*; returns the file path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_file_name(fields)
    path.write_text("\n".join(render_text(fields)) + "\n", encoding="utf-8")
    return path
