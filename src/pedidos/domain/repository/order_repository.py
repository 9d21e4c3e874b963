"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from pedidos.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order (with its items) by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def search_by_customer(self, fragment: str) -> list[Order]:
        """Return orders whose customer name contains *fragment*, ignoring case."""

    @abstractmethod
    def search_by_period(self, start: datetime, end: datetime) -> list[Order]:
        """Return orders created between *start* and *end*, both inclusive."""

    @abstractmethod
    def list_by_status(self, status: OrderStatus) -> list[Order]:
        """Return orders currently in *status*."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order together with its items.

        Items no longer present on the aggregate are removed from the store.
        New orders and items get their IDs assigned.
        """

    @abstractmethod
    def delete(self, order: Order) -> None:
        """Remove an order and all of its items."""
