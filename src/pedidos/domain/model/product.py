"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock goes up and down as orders reserve and release it,
products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from pedidos.domain.exceptions import InsufficientStockError, ValidationError
from pedidos.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``name`` is never blank
    - ``price`` is strictly positive
    - ``stock_quantity`` is always >= 0
    """

    id: int | None
    name: str
    price: Money
    stock_quantity: int = 0
    description: str | None = None

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        price: Money,
        stock_quantity: int = 0,
        description: str | None = None,
    ) -> Product:
        """Create a new catalog product, enforcing all invariants."""
        _check_fields(name, price, stock_quantity)
        return Product(
            id=None,
            name=name.strip(),
            price=price,
            stock_quantity=stock_quantity,
            description=description,
        )

    # --- Mutations ------------------------------------------------------------

    def update(
        self,
        name: str,
        description: str | None,
        price: Money,
        stock_quantity: int,
    ) -> None:
        """Replace every editable field.

        This does NOT affect any existing orders because order items
        capture a price snapshot when they are added.
        """
        _check_fields(name, price, stock_quantity)
        self.name = name.strip()
        self.description = description
        self.price = price
        self.stock_quantity = stock_quantity

    def decrement_stock(self, quantity: int) -> None:
        """Take *quantity* units out of stock.

        Raises InsufficientStockError, leaving stock untouched, when the
        result would be negative.
        """
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than zero")
        new_stock = self.stock_quantity - quantity
        if new_stock < 0:
            raise InsufficientStockError(
                f"Insufficient stock for product: {self.name} "
                f"(requested {quantity}, available {self.stock_quantity})"
            )
        self.stock_quantity = new_stock

    def restore_stock(self, quantity: int) -> None:
        """Put *quantity* units back into stock (order deleted or items replaced)."""
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than zero")
        self.stock_quantity += quantity


def _check_fields(name: str, price: Money, stock_quantity: int) -> None:
    if not name or not name.strip():
        raise ValidationError("Product name is required")
    if price <= Money.zero():
        raise ValidationError("Product price must be greater than zero")
    if stock_quantity < 0:
        raise ValidationError("Stock quantity cannot be negative")
