"""Application service: Add Order Item use case.

A secondary path to the same rules as creating or updating an order:
the owning order must be PENDING and the line is validated, priced and
reserved by the same domain service.
"""

from __future__ import annotations

from pedidos.application.dto import OrderItemDTO, item_to_dto
from pedidos.domain.exceptions import EntityNotFoundError
from pedidos.domain.repository.order_repository import OrderRepository
from pedidos.domain.repository.product_repository import ProductRepository
from pedidos.domain.service.stock_reservation_service import (
    StockReservationService,
)


class AddOrderItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int, product_id: int, quantity: int) -> OrderItemDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order", "id", order_id)
        order.ensure_pending("add items to")

        svc = StockReservationService(self._product_repo)
        [item] = svc.price_lines([(product_id, quantity)])
        svc.reserve([item])

        order.add_item(item)
        self._order_repo.save(order)
        return item_to_dto(item)
