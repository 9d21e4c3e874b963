"""Application service: Order queries (read-only)."""

from __future__ import annotations

from datetime import datetime

from pedidos.application.dto import OrderDTO, order_to_dto
from pedidos.domain.exceptions import EntityNotFoundError, ValidationError
from pedidos.domain.model.order import OrderStatus, as_utc
from pedidos.domain.repository.order_repository import OrderRepository


class OrderQueryHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def list_all(self) -> list[OrderDTO]:
        return [order_to_dto(o) for o in self._order_repo.list_all()]

    def get(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order", "id", order_id)
        return order_to_dto(order)

    def search_by_customer(self, fragment: str) -> list[OrderDTO]:
        """Case-insensitive substring match on the customer name."""
        return [order_to_dto(o) for o in self._order_repo.search_by_customer(fragment)]

    def search_by_period(self, start: datetime, end: datetime) -> list[OrderDTO]:
        """Orders created between *start* and *end*; naive datetimes are UTC."""
        start, end = as_utc(start), as_utc(end)
        if start > end:
            raise ValidationError("Period start must not be after its end")
        return [order_to_dto(o) for o in self._order_repo.search_by_period(start, end)]

    def list_by_status(self, status: OrderStatus) -> list[OrderDTO]:
        return [order_to_dto(o) for o in self._order_repo.list_by_status(status)]
