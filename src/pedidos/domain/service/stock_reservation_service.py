"""Domain service: Stock Reservation.

This service coordinates the cross-aggregate operation of taking stock
out of products when an order consumes it, and putting it back when an
order (or one of its items) goes away.  Both the order handlers and the
standalone item handlers go through it, so the validation rules live in
exactly one place.

The two-phase approach (validate-then-mutate) ensures we never leave
stock in a partially-reserved state if one line fails validation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pedidos.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from pedidos.domain.model.order import OrderItem
from pedidos.domain.model.product import Product
from pedidos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class StockReservationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def price_lines(
        self,
        lines: Iterable[tuple[int, int]],
        credit: dict[int, int] | None = None,
    ) -> list[OrderItem]:
        """Phase 1: validate ``(product_id, quantity)`` lines and price them.

        Every line must reference an existing product, ask for a positive
        quantity, and fit in the product's current stock plus any *credit*
        (units about to be released for that product).  Lines that repeat a
        product are checked against their combined quantity.  Nothing is
        mutated; the returned items carry the products' current prices.
        """
        credit = credit or {}
        items: list[OrderItem] = []
        requested: dict[int, int] = {}

        for product_id, quantity in lines:
            product = self._load(product_id)
            if quantity <= 0:
                raise ValidationError("Quantity must be greater than zero")

            wanted = requested.get(product_id, 0) + quantity
            available = product.stock_quantity + credit.get(product_id, 0)
            if wanted > available:
                raise InsufficientStockError(
                    f"Insufficient stock for product: {product.name} "
                    f"(requested {wanted}, available {available})"
                )
            requested[product_id] = wanted
            items.append(OrderItem.for_product(product, quantity))

        return items

    @staticmethod
    def quantities_by_product(items: Iterable[OrderItem]) -> dict[int, int]:
        """Sum item quantities per product, e.g. to use as a release credit."""
        totals: dict[int, int] = {}
        for item in items:
            totals[item.product_id] = totals.get(item.product_id, 0) + item.quantity.value
        return totals

    def reserve(self, items: Iterable[OrderItem]) -> None:
        """Phase 2: decrement each product's stock by the item quantity."""
        for item in items:
            self.decrement(item.product_id, item.quantity.value)

    def release(self, items: Iterable[OrderItem]) -> None:
        """Put the quantity of every item back onto its product's stock."""
        for item in items:
            product = self._product_repo.get_by_id(item.product_id, lock=True)
            if product is None:
                logger.warning(
                    "Product %s no longer exists; %s unit(s) from item %s not restored",
                    item.product_id, item.quantity.value, item.id,
                )
                continue
            product.restore_stock(item.quantity.value)
            self._product_repo.save(product)
            logger.info(
                "Restored %s unit(s) of product %s (stock now %s)",
                item.quantity.value, product.id, product.stock_quantity,
            )

    def decrement(self, product_id: int, quantity: int) -> Product:
        """Decrement one product's stock, failing if it would go negative."""
        product = self._load(product_id)
        product.decrement_stock(quantity)
        self._product_repo.save(product)
        logger.info(
            "Reserved %s unit(s) of product %s (stock now %s)",
            quantity, product.id, product.stock_quantity,
        )
        return product

    def _load(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id, lock=True)
        if product is None:
            raise EntityNotFoundError("Product", "id", product_id)
        return product
