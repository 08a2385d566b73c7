"""Application service: Commit Order use case.

Finalizes a draft and places the result in the collection: new orders get
the next identifier and today's date and go to the head; edits replace the
stored order in place.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from orderdesk.domain.exceptions import EntityNotFoundError
from orderdesk.domain.model.draft import OrderDraft
from orderdesk.domain.model.order import Order
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.service.order_id_generator import DEFAULT_PREFIX, next_order_id

logger = logging.getLogger(__name__)


class CommitOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        id_prefix: str = DEFAULT_PREFIX,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._order_repo = order_repo
        self._id_prefix = id_prefix
        self._today = today

    def handle(self, draft: OrderDraft) -> Order | None:
        """Commit *draft*; returns None (draft stays open) if it is not ready.

        Raises EntityNotFoundError, leaving the draft open, when the order
        being edited is no longer in the collection.
        """
        if not draft.is_ready:
            return None

        if draft.original is not None:
            order_id = draft.original.id
            # the edited order may have been deleted while the draft was open
            if self._order_repo.get_by_id(order_id) is None:
                raise EntityNotFoundError(f"Order {order_id} not found")
        else:
            order_id = next_order_id(self._order_repo.last_id(), self._id_prefix)

        order = draft.finalize(order_id, self._today())
        if order is None:
            return None

        if draft.is_edit:
            self._order_repo.replace(order)
        else:
            self._order_repo.insert(order)
        logger.info("Committed order %s with %d line(s)", order.id, len(order.products))
        return order
