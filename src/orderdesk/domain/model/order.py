"""Order aggregate: a customer profile plus its product lines.

An Order only exists once a draft has been committed. Its id and date are
fixed at that point; an edit produces a new Order value carrying the same
id and date, which the collection swaps in whole.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.customer import CustomerProfile
from orderdesk.domain.model.product import ProductLine
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.service.customer_validation import is_complete, missing_fields


@dataclass(frozen=True)
class OrderSummary:
    """Reduced view for callers that only list orders."""

    id: str
    name: str
    address: str
    date: date
    total: Money


@dataclass(frozen=True)
class Order:
    """Aggregate root for committed orders.

    Use ``Order.create()``, it enforces the commit rules. The plain
    constructor is kept simple so a stored order can be rebuilt as-is.
    """

    id: str
    customer: CustomerProfile
    date: date
    products: tuple[ProductLine, ...]

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        order_id: str,
        customer: CustomerProfile,
        products: list[ProductLine] | tuple[ProductLine, ...],
        order_date: date,
    ) -> Order:
        """Build a committed order, enforcing the commit rules."""
        if not is_complete(customer):
            raise ValidationError(
                "Customer information is incomplete: "
                + ", ".join(missing_fields(customer))
            )
        if not products:
            raise ValidationError("Order must contain at least one product")
        return Order(
            id=order_id,
            customer=customer,
            date=order_date,
            products=tuple(products),
        )

    # --- Computed properties --------------------------------------------------

    @property
    def name(self) -> str:
        return self.customer.name

    @property
    def address(self) -> str:
        return self.customer.full_address

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.products:
            result = result + line.line_total
        return result

    def summary(self) -> OrderSummary:
        return OrderSummary(
            id=self.id,
            name=self.name,
            address=self.address,
            date=self.date,
            total=self.total,
        )
