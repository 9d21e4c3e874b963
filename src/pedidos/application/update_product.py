"""Application service: Update Product use case."""

from __future__ import annotations

from decimal import Decimal

from pedidos.application.dto import ProductDTO, product_to_dto
from pedidos.domain.exceptions import EntityNotFoundError
from pedidos.domain.model.value_objects import Money
from pedidos.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        name: str,
        price: str | Decimal,
        stock_quantity: int,
        description: str | None = None,
    ) -> ProductDTO:
        """Replace a product's name, description, price and stock quantity.

        This does NOT affect any existing orders; their items captured a
        price snapshot when they were added.
        """
        product = self._product_repo.get_by_id(product_id, lock=True)
        if product is None:
            raise EntityNotFoundError("Product", "id", product_id)

        product.update(
            name=name,
            description=description,
            price=Money.of(price),
            stock_quantity=stock_quantity,
        )
        self._product_repo.save(product)
        return product_to_dto(product)
