"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from pedidos.domain.model.order import Order, OrderItem, OrderStatus, as_utc
from pedidos.domain.model.value_objects import Money, Quantity
from pedidos.domain.repository.order_repository import OrderRepository
from pedidos.infrastructure.persistence.database import OrderItemRow, OrderRow


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        row = self._session.get(OrderRow, order_id)
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Order]:
        return self._query(select(OrderRow))

    def search_by_customer(self, fragment: str) -> list[Order]:
        return self._query(
            select(OrderRow).where(
                func.lower(OrderRow.customer_name).contains(fragment.lower(), autoescape=True)
            )
        )

    def search_by_period(self, start: datetime, end: datetime) -> list[Order]:
        return self._query(
            select(OrderRow).where(
                OrderRow.created_at.between(to_db_datetime(start), to_db_datetime(end))
            )
        )

    def list_by_status(self, status: OrderStatus) -> list[Order]:
        return self._query(select(OrderRow).where(OrderRow.status == status.value))

    def save(self, order: Order) -> None:
        row = None
        if order.id is not None:
            row = self._session.get(OrderRow, order.id)
        if row is None:
            row = OrderRow()
            self._session.add(row)

        row.customer_name = order.customer_name
        row.note = order.note
        row.status = order.status.value
        row.created_at = to_db_datetime(order.created_at)
        row.total = order.total.amount

        existing = {item_row.id: item_row for item_row in row.items}
        pairs: list[tuple[OrderItem, OrderItemRow]] = []
        for item in order.items:
            item_row = existing.get(item.id) if item.id is not None else None
            if item_row is None:
                item_row = OrderItemRow()
            _fill_item_row(item_row, item)
            pairs.append((item, item_row))

        # Rows dropped from the collection are deleted (delete-orphan).
        row.items = [item_row for _, item_row in pairs]
        self._session.flush()

        order.assign_id(row.id)
        for item, item_row in pairs:
            item.id = item_row.id

    def delete(self, order: Order) -> None:
        row = self._session.get(OrderRow, order.id)
        if row is not None:
            self._session.delete(row)
            self._session.flush()

    # --- Serialization --------------------------------------------------------

    def _query(self, stmt) -> list[Order]:
        return [self._to_domain(row) for row in self._session.scalars(stmt.order_by(OrderRow.id))]

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        return Order(
            id=row.id,
            customer_name=row.customer_name,
            items=[item_to_domain(item_row) for item_row in row.items],
            status=OrderStatus(row.status),
            created_at=from_db_datetime(row.created_at),
            note=row.note,
        )


def item_to_domain(row: OrderItemRow) -> OrderItem:
    return OrderItem(
        id=row.id,
        order_id=row.order_id,
        product_id=row.product_id,
        product_name=row.product_name,
        quantity=Quantity(row.quantity),
        unit_price=Money.of(row.unit_price),
    )


def _fill_item_row(row: OrderItemRow, item: OrderItem) -> None:
    row.product_id = item.product_id
    row.product_name = item.product_name
    row.quantity = item.quantity.value
    row.unit_price = item.unit_price.amount
    row.total = item.total.amount


def to_db_datetime(moment: datetime) -> datetime:
    return as_utc(moment).replace(tzinfo=None)


def from_db_datetime(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
