"""SQLAlchemy-backed implementation of OrderItemRepository (read side)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from pedidos.domain.model.order import OrderItem
from pedidos.domain.repository.order_item_repository import OrderItemRepository
from pedidos.infrastructure.persistence.database import OrderItemRow
from pedidos.infrastructure.persistence.sqlalchemy_order_repository import (
    item_to_domain,
)


class SqlAlchemyOrderItemRepository(OrderItemRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, item_id: int) -> OrderItem | None:
        row = self._session.get(OrderItemRow, item_id)
        return item_to_domain(row) if row is not None else None

    def list_all(self) -> list[OrderItem]:
        return self._query(select(OrderItemRow))

    def list_by_order(self, order_id: int) -> list[OrderItem]:
        return self._query(select(OrderItemRow).where(OrderItemRow.order_id == order_id))

    def list_by_product(self, product_id: int) -> list[OrderItem]:
        return self._query(select(OrderItemRow).where(OrderItemRow.product_id == product_id))

    def _query(self, stmt) -> list[OrderItem]:
        return [item_to_domain(row) for row in self._session.scalars(stmt.order_by(OrderItemRow.id))]
