"""Session-scoped, in-memory implementation of OrderRepository.

Orders live for as long as the process does; nothing is written to disk.
"""

from __future__ import annotations

import logging

from orderdesk.domain.exceptions import DuplicateOrderError
from orderdesk.domain.model.order import Order
from orderdesk.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._orders: list[Order] = []
        self._last_id: str | None = None
        # seed oldest last so the first element ends up at the head
        for order in reversed(orders or []):
            self.insert(order)

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        return list(self._orders)

    def get_by_id(self, order_id: str) -> Order | None:
        index = self._index_of(order_id)
        return None if index is None else self._orders[index]

    def last_id(self) -> str | None:
        return self._last_id

    def insert(self, order: Order) -> None:
        if self._index_of(order.id) is not None:
            raise DuplicateOrderError(f"Order {order.id} already exists")
        self._orders.insert(0, order)
        self._last_id = order.id
        logger.info("Order %s added (total %s)", order.id, order.total)

    def replace(self, order: Order) -> bool:
        index = self._index_of(order.id)
        if index is None:
            logger.debug("Replace skipped, order %s not found", order.id)
            return False
        self._orders[index] = order
        logger.info("Order %s updated (total %s)", order.id, order.total)
        return True

    def remove(self, order_id: str) -> bool:
        index = self._index_of(order_id)
        if index is None:
            logger.debug("Remove skipped, order %s not found", order_id)
            return False
        del self._orders[index]
        logger.info("Order %s deleted", order_id)
        return True

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, order_id: str) -> int | None:
        for i, order in enumerate(self._orders):
            if order.id == order_id:
                return i
        return None
