"""Application service: Order Item queries (read-only)."""

from __future__ import annotations

from pedidos.application.dto import OrderItemDTO, item_to_dto
from pedidos.domain.exceptions import EntityNotFoundError
from pedidos.domain.repository.order_item_repository import OrderItemRepository


class OrderItemQueryHandler:

    def __init__(self, item_repo: OrderItemRepository) -> None:
        self._item_repo = item_repo

    def list_all(self) -> list[OrderItemDTO]:
        return [item_to_dto(i) for i in self._item_repo.list_all()]

    def get(self, item_id: int) -> OrderItemDTO:
        item = self._item_repo.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError("OrderItem", "id", item_id)
        return item_to_dto(item)

    def list_by_order(self, order_id: int) -> list[OrderItemDTO]:
        return [item_to_dto(i) for i in self._item_repo.list_by_order(order_id)]

    def list_by_product(self, product_id: int) -> list[OrderItemDTO]:
        return [item_to_dto(i) for i in self._item_repo.list_by_product(product_id)]
