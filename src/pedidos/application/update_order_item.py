"""Application service: Update Order Item quantity use case.

The unit price stays at its original snapshot; only the quantity (and
therefore the item and order totals) changes.  Stock is reconciled by
the difference between the old and the new quantity.
"""

from __future__ import annotations

from pedidos.application.dto import OrderItemDTO, item_to_dto
from pedidos.domain.exceptions import EntityNotFoundError
from pedidos.domain.repository.order_item_repository import OrderItemRepository
from pedidos.domain.repository.order_repository import OrderRepository
from pedidos.domain.repository.product_repository import ProductRepository
from pedidos.domain.service.stock_reservation_service import (
    StockReservationService,
)


class UpdateOrderItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        item_repo: OrderItemRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._item_repo = item_repo
        self._product_repo = product_repo

    def handle(self, item_id: int, quantity: int) -> OrderItemDTO:
        found = self._item_repo.get_by_id(item_id)
        if found is None or found.order_id is None:
            raise EntityNotFoundError("OrderItem", "id", item_id)

        order = self._order_repo.get_by_id(found.order_id)
        if order is None:
            raise EntityNotFoundError("Order", "id", found.order_id)
        order.ensure_pending("update items of")
        item = order.find_item(item_id)

        svc = StockReservationService(self._product_repo)
        svc.price_lines(
            [(item.product_id, quantity)],
            credit={item.product_id: item.quantity.value},
        )

        svc.release([item])
        item.set_quantity(quantity)
        svc.reserve([item])

        self._order_repo.save(order)
        return item_to_dto(item)
