"""Application service: Delete Order use case.

The yes/no confirmation is the caller's business; by the time this runs
the operator has agreed.
"""

from __future__ import annotations

from orderdesk.domain.repository.order_repository import OrderRepository


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> bool:
        """Remove the order; False when there was nothing to remove."""
        return self._order_repo.remove(order_id)
