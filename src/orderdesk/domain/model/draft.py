"""Order draft: the two-step entry flow behind "new" and "edit".

A fresh draft starts EMPTY, becomes CUSTOMER on the first field change, and
moves to LINES once the customer section is complete. A draft opened on an
existing order starts directly in LINES, pre-populated from it. From LINES
the draft can go back to CUSTOMER at any time without losing data, or be
finalized into an Order when the customer is complete and at least one
line exists.

Rejected actions never raise: they leave the draft untouched and return
``False`` (or ``None``) so the caller can show "not ready". The only
exception is unparseable price/quantity text, see ``add_or_update_line``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum

from orderdesk.domain.model.customer import CustomerProfile
from orderdesk.domain.model.order import Order
from orderdesk.domain.model.product import ProductLine
from orderdesk.domain.model.value_objects import Money, Quantity
from orderdesk.domain.service.customer_validation import is_complete

logger = logging.getLogger(__name__)


class DraftState(Enum):
    EMPTY = "EMPTY"
    CUSTOMER = "CUSTOMER"
    LINES = "LINES"
    SAVED = "SAVED"
    DISCARDED = "DISCARDED"


_OPEN_STATES = (DraftState.EMPTY, DraftState.CUSTOMER, DraftState.LINES)


@dataclass(frozen=True)
class LineBuffer:
    """The product-line input fields, as text."""

    name: str = ""
    unit_price: str = ""
    quantity: str = ""

    @staticmethod
    def of(line: ProductLine) -> LineBuffer:
        return LineBuffer(
            name=line.name,
            unit_price=f"{line.unit_price.amount:f}",
            quantity=str(line.quantity.value),
        )


class OrderDraft:
    """In-progress order undergoing customer and line-item entry."""

    def __init__(self, original: Order | None = None) -> None:
        self._original = original
        self.buffer = LineBuffer()
        self.editing_index: int | None = None

        if original is None:
            self.customer = CustomerProfile()
            self.lines: list[ProductLine] = []
            self.state = DraftState.EMPTY
        else:
            self.customer = original.customer
            self.lines = list(original.products)
            self.state = DraftState.LINES

    # --- Introspection --------------------------------------------------------

    @property
    def original(self) -> Order | None:
        """The order being edited, or None for a new order."""
        return self._original

    @property
    def is_edit(self) -> bool:
        return self._original is not None

    @property
    def is_open(self) -> bool:
        return self.state in _OPEN_STATES

    @property
    def customer_complete(self) -> bool:
        return is_complete(self.customer)

    @property
    def is_ready(self) -> bool:
        """True when ``finalize`` would succeed."""
        return (
            self.state == DraftState.LINES
            and self.customer_complete
            and bool(self.lines)
        )

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    # --- Customer step --------------------------------------------------------

    def update_customer_field(self, field_name: str, value: str) -> bool:
        """Set one customer field. Unknown field names raise."""
        if not self.is_open:
            logger.debug("Ignoring field update on %s draft", self.state.value)
            return False
        self.customer = self.customer.with_field(field_name, value)
        if self.state == DraftState.EMPTY:
            self.state = DraftState.CUSTOMER
        return True

    def advance_step(self) -> bool:
        """CUSTOMER -> LINES, only once the customer section is complete."""
        if self.state not in (DraftState.EMPTY, DraftState.CUSTOMER):
            return False
        if not self.customer_complete:
            logger.debug("Customer information incomplete, staying on customer step")
            return False
        self.state = DraftState.LINES
        return True

    def go_back(self) -> bool:
        """LINES -> CUSTOMER. Always allowed, keeps everything entered."""
        if self.state != DraftState.LINES:
            return False
        self.state = DraftState.CUSTOMER
        return True

    # --- Lines step -----------------------------------------------------------

    def add_or_update_line(self, name: str, unit_price: str, quantity: str) -> bool:
        """Append a line, or replace the one being edited.

        Blank input is a silent no-op. Text that is not a non-negative
        number raises ``InvalidNumericInput`` and leaves the draft as it
        was. On success the buffer and edit target are cleared.
        """
        if not name or not unit_price or not quantity:
            return False
        if self.state != DraftState.LINES:
            return False

        line = ProductLine(
            name=name,
            unit_price=Money.parse(unit_price),
            quantity=Quantity.parse(quantity),
        )

        if self.editing_index is not None:
            self.lines[self.editing_index] = line
        else:
            self.lines.append(line)
        self._clear_buffer()
        return True

    def start_line_edit(self, index: int) -> bool:
        """Load line *index* into the buffer and mark it as the edit target."""
        if self.state != DraftState.LINES or not self._valid_index(index):
            return False
        self.buffer = LineBuffer.of(self.lines[index])
        self.editing_index = index
        return True

    def remove_line(self, index: int) -> bool:
        """Delete line *index*; clears the buffer if it was being edited."""
        if self.state != DraftState.LINES or not self._valid_index(index):
            return False
        del self.lines[index]

        if self.editing_index == index:
            self._clear_buffer()
        elif self.editing_index is not None and index < self.editing_index:
            # keep pointing at the same line
            self.editing_index -= 1
        return True

    # --- Completion -----------------------------------------------------------

    def finalize(self, new_order_id: str, today: date) -> Order | None:
        """Turn the draft into an Order and mark it SAVED.

        *new_order_id* and *today* are only used for new orders; an edit
        keeps the id and date of the order it started from.
        """
        if not self.is_ready:
            logger.info("Draft not ready to save (state=%s)", self.state.value)
            return None

        if self._original is not None:
            order_id, order_date = self._original.id, self._original.date
        else:
            order_id, order_date = new_order_id, today

        order = Order.create(
            order_id=order_id,
            customer=self.customer,
            products=self.lines,
            order_date=order_date,
        )
        self.state = DraftState.SAVED
        return order

    def discard(self) -> None:
        """Cancel the draft. Nothing it held is kept anywhere else."""
        if self.is_open:
            self.state = DraftState.DISCARDED

    # --- Internal helpers -----------------------------------------------------

    def _valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.lines)

    def _clear_buffer(self) -> None:
        self.buffer = LineBuffer()
        self.editing_index = None
