"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from pedidos.domain.model.order import Order, OrderItem
from pedidos.domain.model.product import Product


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    description: str | None
    price: Decimal
    stock_quantity: int


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single order line."""

    id: int
    order_id: int
    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal
    total: Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order with its items."""

    id: int
    customer_name: str
    note: str | None
    status: str
    created_at: datetime
    total: Decimal
    items: list[OrderItemDTO]


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        description=product.description,
        price=product.price.amount,
        stock_quantity=product.stock_quantity,
    )


def item_to_dto(item: OrderItem) -> OrderItemDTO:
    return OrderItemDTO(
        id=item.id,  # type: ignore[arg-type]
        order_id=item.order_id,  # type: ignore[arg-type]
        product_id=item.product_id,
        product_name=item.product_name,
        quantity=item.quantity.value if item.quantity else 0,
        unit_price=item.unit_price.amount if item.unit_price else Decimal("0"),
        total=item.total.amount,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        note=order.note,
        status=order.status.value,
        created_at=order.created_at,
        total=order.total.amount,
        items=[item_to_dto(item) for item in order.items],
    )
