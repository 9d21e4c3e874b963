"""Application service: Update Order use case.

Only PENDING orders can be edited.  When a replacement item list is
supplied, the old items' quantities count as available while the new
items are validated, so an order can be re-submitted with the same
products without double-counting its own reservation.
"""

from __future__ import annotations

import logging

from pedidos.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from pedidos.domain.exceptions import EntityNotFoundError
from pedidos.domain.model.order import OrderItem, OrderStatus
from pedidos.domain.repository.order_repository import OrderRepository
from pedidos.domain.repository.product_repository import ProductRepository
from pedidos.domain.service.stock_reservation_service import (
    StockReservationService,
)

logger = logging.getLogger(__name__)


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(
        self,
        order_id: int,
        customer_name: str,
        note: str | None = None,
        status: OrderStatus | None = None,
        item_specs: list[OrderItemSpec] | None = None,
    ) -> OrderDTO:
        """Update customer, note, and optionally status and items.

        ``item_specs`` of None or an empty list keeps the current items.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order", "id", order_id)

        order.ensure_pending("update")

        # Validate everything before touching the order or any stock.
        change_status = status is not None and status != order.status
        if change_status:
            order.check_transition(status)  # type: ignore[arg-type]

        svc = StockReservationService(self._product_repo)
        new_items: list[OrderItem] = []
        if item_specs:
            new_items = svc.price_lines(
                ((s.product_id, s.quantity) for s in item_specs),
                credit=svc.quantities_by_product(order.items),
            )

        order.update_details(customer_name, note)
        if change_status:
            order.transition_to(status)  # type: ignore[arg-type]

        if new_items:
            svc.release(order.clear_items())
            svc.reserve(new_items)
            for item in new_items:
                order.add_item(item)
            logger.info("Order #%s items replaced (%d line(s))", order.id, len(new_items))

        self._order_repo.save(order)
        return order_to_dto(order)
