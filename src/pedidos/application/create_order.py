"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
Coordinates two aggregates: every accepted item takes its quantity out
of the referenced product's stock as part of the same unit of work.
"""

from __future__ import annotations

import logging
from datetime import datetime

from pedidos.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from pedidos.domain.exceptions import ValidationError
from pedidos.domain.model.order import Order, OrderStatus
from pedidos.domain.repository.order_repository import OrderRepository
from pedidos.domain.repository.product_repository import ProductRepository
from pedidos.domain.service.stock_reservation_service import (
    StockReservationService,
)

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(
        self,
        customer_name: str,
        item_specs: list[OrderItemSpec],
        note: str | None = None,
        status: OrderStatus | None = None,
        created_at: datetime | None = None,
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Reject an empty item list.
        2. Validate every line against its product (exists, quantity > 0,
           enough stock) and build items with *current* prices (snapshot).
        3. Let the Order aggregate validate its own rules.
        4. Persist, then take each item's quantity out of stock.
        """
        logger.info("Creating order for customer '%s'", customer_name)
        if not item_specs:
            raise ValidationError("Order must contain at least one item")

        svc = StockReservationService(self._product_repo)
        items = svc.price_lines((s.product_id, s.quantity) for s in item_specs)

        order = Order.create(
            customer_name=customer_name,
            items=items,
            note=note,
            status=status,
            created_at=created_at,
        )
        self._order_repo.save(order)

        svc.reserve(order.items)

        logger.info("Order #%s created with total %s", order.id, order.total)
        return order_to_dto(order)
