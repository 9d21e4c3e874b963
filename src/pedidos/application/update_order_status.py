"""Application service: Update Order Status use case.

Status changes never touch stock; only deleting a PENDING order or
replacing its items gives stock back.
"""

from __future__ import annotations

import logging

from pedidos.application.dto import OrderDTO, order_to_dto
from pedidos.domain.exceptions import EntityNotFoundError
from pedidos.domain.model.order import OrderStatus
from pedidos.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, new_status: OrderStatus) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order", "id", order_id)

        previous = order.status
        order.transition_to(new_status)
        self._order_repo.save(order)

        logger.info(
            "Order #%s status changed %s -> %s",
            order.id, previous.value, new_status.value,
        )
        return order_to_dto(order)
