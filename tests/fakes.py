"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the SQLAlchemy
repositories but keep everything in a dict. No database, no side effects.
"""

from __future__ import annotations

from datetime import datetime

from pedidos.domain.model.order import Order, OrderItem, OrderStatus
from pedidos.domain.model.product import Product
from pedidos.domain.repository.order_item_repository import OrderItemRepository
from pedidos.domain.repository.order_repository import OrderRepository
from pedidos.domain.repository.product_repository import ProductRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self._next_item_id = 1

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def search_by_customer(self, fragment: str) -> list[Order]:
        return [o for o in self._store.values() if fragment.lower() in o.customer_name.lower()]

    def search_by_period(self, start: datetime, end: datetime) -> list[Order]:
        return [o for o in self._store.values() if start <= o.created_at <= end]

    def list_by_status(self, status: OrderStatus) -> list[Order]:
        return [o for o in self._store.values() if o.status == status]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.assign_id(self._next_id)
            self._next_id += 1
        for item in order.items:
            item.order_id = order.id
            if item.id is None:
                item.id = self._next_item_id
                self._next_item_id += 1
        self._store[order.id] = order

    def delete(self, order: Order) -> None:
        self._store.pop(order.id, None)


class FakeOrderItemRepository(OrderItemRepository):
    """Reads items straight out of the orders held by a FakeOrderRepository."""

    def __init__(self, order_repo: FakeOrderRepository) -> None:
        self._order_repo = order_repo

    def _all(self) -> list[OrderItem]:
        return [item for order in self._order_repo.list_all() for item in order.items]

    def get_by_id(self, item_id: int) -> OrderItem | None:
        for item in self._all():
            if item.id == item_id:
                return item
        return None

    def list_all(self) -> list[OrderItem]:
        return self._all()

    def list_by_order(self, order_id: int) -> list[OrderItem]:
        return [i for i in self._all() if i.order_id == order_id]

    def list_by_product(self, product_id: int) -> list[OrderItem]:
        return [i for i in self._all() if i.product_id == product_id]


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.save(p)

    def get_by_id(self, product_id: int, lock: bool = False) -> Product | None:
        return self._store.get(product_id)

    def search_by_name(self, fragment: str) -> list[Product]:
        return [p for p in self._store.values() if fragment.lower() in p.name.lower()]

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self._next_id
        self._next_id = max(self._next_id, product.id + 1)
        self._store[product.id] = product

    def delete(self, product: Product) -> None:
        self._store.pop(product.id, None)
