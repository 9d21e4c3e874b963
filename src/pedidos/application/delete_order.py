"""Application service: Delete Order use case.

Only PENDING orders can be deleted.  Every item's quantity goes back
onto its product's stock before the order (and its items) is removed.
"""

from __future__ import annotations

import logging

from pedidos.domain.exceptions import EntityNotFoundError
from pedidos.domain.repository.order_repository import OrderRepository
from pedidos.domain.repository.product_repository import ProductRepository
from pedidos.domain.service.stock_reservation_service import (
    StockReservationService,
)

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order", "id", order_id)

        order.ensure_pending("delete")

        svc = StockReservationService(self._product_repo)
        svc.release(order.items)

        self._order_repo.delete(order)
        logger.info("Order #%s deleted", order_id)
