"""Application service: Export Order use case."""

from __future__ import annotations

from datetime import date
from typing import Callable

from orderdesk.domain.exceptions import EntityNotFoundError
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.service.export_formatter import ExportField, export_order


class ExportOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        currency: str = "$",
        total_currency: str = "R$",
        today: Callable[[], date] = date.today,
    ) -> None:
        self._order_repo = order_repo
        self._currency = currency
        self._total_currency = total_currency
        self._today = today

    def handle(self, order_id: str) -> list[ExportField]:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return export_order(
            order,
            exported_on=self._today(),
            currency=self._currency,
            total_currency=self._total_currency,
        )
