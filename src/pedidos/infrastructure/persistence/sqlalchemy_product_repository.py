"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from pedidos.domain.model.product import Product
from pedidos.domain.model.value_objects import Money
from pedidos.domain.repository.product_repository import ProductRepository
from pedidos.infrastructure.persistence.database import ProductRow


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int, lock: bool = False) -> Product | None:
        row = self._session.get(
            ProductRow, product_id, with_for_update=True if lock else None
        )
        return self._to_domain(row) if row is not None else None

    def search_by_name(self, fragment: str) -> list[Product]:
        stmt = (
            select(ProductRow)
            .where(func.lower(ProductRow.name).contains(fragment.lower(), autoescape=True))
            .order_by(ProductRow.id)
        )
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    def list_all(self) -> list[Product]:
        stmt = select(ProductRow).order_by(ProductRow.id)
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    def save(self, product: Product) -> None:
        row = None
        if product.id is not None:
            row = self._session.get(ProductRow, product.id)
        if row is None:
            row = ProductRow()
            self._session.add(row)

        row.name = product.name
        row.description = product.description
        row.price = product.price.amount
        row.stock_quantity = product.stock_quantity
        self._session.flush()
        product.id = row.id

    def delete(self, product: Product) -> None:
        row = self._session.get(ProductRow, product.id)
        if row is not None:
            self._session.delete(row)
            self._session.flush()

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            description=row.description,
            price=Money.of(row.price),
            stock_quantity=row.stock_quantity,
        )
