"""Product line: one purchasable entry inside an order."""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class ProductLine:
    """A product name with its unit price and quantity.

    Lines are never mutated; an edit re-supplies all three fields and the
    draft swaps in a new instance. ``line_total`` is derived on every
    access so it cannot drift from its inputs.
    """

    name: str
    unit_price: Money
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value
