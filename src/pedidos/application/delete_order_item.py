"""Application service: Delete Order Item use case."""

from __future__ import annotations

from pedidos.domain.exceptions import EntityNotFoundError
from pedidos.domain.repository.order_item_repository import OrderItemRepository
from pedidos.domain.repository.order_repository import OrderRepository
from pedidos.domain.repository.product_repository import ProductRepository
from pedidos.domain.service.stock_reservation_service import (
    StockReservationService,
)


class DeleteOrderItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        item_repo: OrderItemRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._item_repo = item_repo
        self._product_repo = product_repo

    def handle(self, item_id: int) -> None:
        """Remove an item from its PENDING order and give its stock back."""
        found = self._item_repo.get_by_id(item_id)
        if found is None or found.order_id is None:
            raise EntityNotFoundError("OrderItem", "id", item_id)

        order = self._order_repo.get_by_id(found.order_id)
        if order is None:
            raise EntityNotFoundError("Order", "id", found.order_id)
        order.ensure_pending("delete items of")

        item = order.remove_item(item_id)
        StockReservationService(self._product_repo).release([item])
        self._order_repo.save(order)
