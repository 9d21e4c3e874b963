"""Read-side repository for order items.

Items are written through their owning Order aggregate; this
repository only answers queries that cut across orders.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pedidos.domain.model.order import OrderItem


class OrderItemRepository(ABC):

    @abstractmethod
    def get_by_id(self, item_id: int) -> OrderItem | None:
        """Return an item by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[OrderItem]:
        """Return every item of every order."""

    @abstractmethod
    def list_by_order(self, order_id: int) -> list[OrderItem]:
        """Return the items belonging to an order."""

    @abstractmethod
    def list_by_product(self, product_id: int) -> list[OrderItem]:
        """Return the items that reference a product."""
