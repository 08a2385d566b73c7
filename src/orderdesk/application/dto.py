"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.model.order import Order


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single product line as displayed to the user."""

    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: one row of the order list."""

    id: str
    customer_name: str
    address: str
    date: str
    total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_name: str
    person_type: str
    address: str
    date: str
    items: list[OrderLineItemDTO]
    total: str


def to_summary_dto(order: Order) -> OrderSummaryDTO:
    summary = order.summary()
    return OrderSummaryDTO(
        id=summary.id,
        customer_name=summary.name,
        address=summary.address,
        date=summary.date.isoformat(),
        total=str(summary.total),
    )


def to_order_dto(order: Order) -> OrderDTO:
    person_type = order.customer.person_type
    return OrderDTO(
        id=order.id,
        customer_name=order.name,
        person_type=person_type.value if person_type else "",
        address=order.address,
        date=order.date.isoformat(),
        items=[
            OrderLineItemDTO(
                product_name=line.name,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in order.products
        ],
        total=str(order.total),
    )
