"""Flattens an Order into printable labeled fields.

The output is renderer-agnostic: header fields first, then one group of
fields per product line (``row`` = 1-based position), then the grand total.
The formatter neither validates nor mutates the order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from orderdesk.domain.model.order import Order

TITLE = "Order Manager"


@dataclass(frozen=True)
class ExportField:
    section: str  # "header" | "line" | "footer"
    label: str
    value: str
    row: int | None = None


def export_order(
    order: Order,
    exported_on: date,
    currency: str = "$",
    total_currency: str = "R$",
) -> list[ExportField]:
    fields = [
        ExportField("header", "Title", TITLE),
        ExportField("header", "ID", order.id),
        ExportField("header", "Customer Name", order.name),
        ExportField("header", "Address", order.address),
        ExportField("header", "Order Date", exported_on.isoformat()),
    ]

    for position, line in enumerate(order.products, start=1):
        fields.extend([
            ExportField("line", "#", str(position), row=position),
            ExportField("line", "Product", line.name, row=position),
            ExportField("line", "Price", line.unit_price.format(currency), row=position),
            ExportField("line", "Qty", str(line.quantity.value), row=position),
            ExportField("line", "Total", line.line_total.format(currency), row=position),
        ])

    fields.append(
        ExportField("footer", "Order Total", order.total.format(total_currency))
    )
    return fields
