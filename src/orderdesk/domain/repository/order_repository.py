"""Abstract repository for the order collection.

The collection is ordered most-recent-first and unique by id. Concrete
implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, most recent first."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def last_id(self) -> str | None:
        """ID of the most recently inserted order, or None if none ever was.

        Survives the removal of that order so identifiers are never reused.
        """

    @abstractmethod
    def insert(self, order: Order) -> None:
        """Prepend a new order. Raises DuplicateOrderError if the id exists."""

    @abstractmethod
    def replace(self, order: Order) -> bool:
        """Swap in *order* at the position of the one with the same id.

        Returns False (and changes nothing) when no such order exists.
        """

    @abstractmethod
    def remove(self, order_id: str) -> bool:
        """Delete the order with *order_id*; False if it was not there."""

    def search(self, query: str) -> list[Order]:
        """Case-insensitive substring match on id or customer name.

        An empty query returns the whole collection in its current order.
        """
        orders = self.list_all()
        if not query:
            return orders
        needle = query.lower()
        return [
            o for o in orders
            if needle in o.id.lower() or needle in o.name.lower()
        ]
