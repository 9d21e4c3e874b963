"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from pedidos.application.dto import ProductDTO, product_to_dto
from pedidos.domain.model.product import Product
from pedidos.domain.model.value_objects import Money
from pedidos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str | Decimal,
        stock_quantity: int = 0,
        description: str | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog. The store assigns its ID."""
        product = Product.create(
            name=name,
            price=Money.of(price),
            stock_quantity=stock_quantity,
            description=description,
        )
        self._product_repo.save(product)
        logger.info("Product %s '%s' added", product.id, product.name)
        return product_to_dto(product)
