"""Application service: Search Orders use case (query)."""

from __future__ import annotations

from orderdesk.application.dto import OrderSummaryDTO, to_summary_dto
from orderdesk.domain.repository.order_repository import OrderRepository


class SearchOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, query: str = "") -> list[OrderSummaryDTO]:
        return [to_summary_dto(o) for o in self._order_repo.search(query)]
