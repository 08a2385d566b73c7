"""Application service: open a draft for a new or an existing order."""

from __future__ import annotations

from orderdesk.domain.exceptions import EntityNotFoundError
from orderdesk.domain.model.draft import OrderDraft
from orderdesk.domain.repository.order_repository import OrderRepository


class StartDraftHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str | None = None) -> OrderDraft:
        """Start an empty draft, or an edit draft of *order_id*."""
        if order_id is None:
            return OrderDraft()

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return OrderDraft(original=order)
