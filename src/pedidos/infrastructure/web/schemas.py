"""Request / response bodies for the HTTP API.

JSON field names are the public (Portuguese) names of the API; Python
attribute names stay in English and map through aliases.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from pedidos.application.dto import OrderDTO, OrderItemDTO, OrderItemSpec, ProductDTO
from pedidos.domain.model.order import OrderStatus

# Upper bound of the INTEGER columns holding stock and quantities.
MAX_INT = 2**31 - 1

# Amounts travel as JSON numbers, not strings.
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ── Products ──────────────────────────────────────────────────────────────────


class ProductRequest(_Schema):
    name: str = Field(alias="nome", min_length=1, max_length=255)
    description: str | None = Field(default=None, alias="descricao")
    price: Decimal = Field(alias="preco", gt=0, max_digits=12, decimal_places=2)
    stock_quantity: int = Field(alias="quantidadeEstoque", ge=0, le=MAX_INT)


class ProductResponse(_Schema):
    id: int
    name: str = Field(alias="nome")
    description: str | None = Field(alias="descricao")
    price: Amount = Field(alias="preco")
    stock_quantity: int = Field(alias="quantidadeEstoque")

    @staticmethod
    def from_dto(dto: ProductDTO) -> ProductResponse:
        return ProductResponse(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            price=dto.price,
            stock_quantity=dto.stock_quantity,
        )


# ── Order items ───────────────────────────────────────────────────────────────


class OrderItemRequest(_Schema):
    product_id: int = Field(alias="produtoId", le=MAX_INT)
    quantity: int = Field(alias="quantidade", le=MAX_INT)

    def to_spec(self) -> OrderItemSpec:
        return OrderItemSpec(product_id=self.product_id, quantity=self.quantity)


class AddOrderItemRequest(OrderItemRequest):
    order_id: int = Field(alias="pedidoId", le=MAX_INT)


class UpdateOrderItemRequest(_Schema):
    quantity: int = Field(alias="quantidade", le=MAX_INT)


class OrderItemResponse(_Schema):
    id: int
    order_id: int = Field(alias="pedidoId")
    product_id: int = Field(alias="produtoId")
    product_name: str = Field(alias="nomeProduto")
    quantity: int = Field(alias="quantidade")
    unit_price: Amount = Field(alias="precoUnitario")
    total: Amount = Field(alias="valorTotal")

    @staticmethod
    def from_dto(dto: OrderItemDTO) -> OrderItemResponse:
        return OrderItemResponse(
            id=dto.id,
            order_id=dto.order_id,
            product_id=dto.product_id,
            product_name=dto.product_name,
            quantity=dto.quantity,
            unit_price=dto.unit_price,
            total=dto.total,
        )


# ── Orders ────────────────────────────────────────────────────────────────────


class CreateOrderRequest(_Schema):
    customer_name: str = Field(alias="cliente", min_length=1, max_length=255)
    note: str | None = Field(default=None, alias="observacao")
    status: OrderStatus | None = None
    created_at: datetime | None = Field(default=None, alias="dataPedido")
    items: list[OrderItemRequest] = Field(default_factory=list, alias="itens")


class UpdateOrderRequest(_Schema):
    customer_name: str = Field(alias="cliente", min_length=1, max_length=255)
    note: str | None = Field(default=None, alias="observacao")
    status: OrderStatus | None = None
    items: list[OrderItemRequest] | None = Field(default=None, alias="itens")


class OrderResponse(_Schema):
    id: int
    customer_name: str = Field(alias="cliente")
    created_at: datetime = Field(alias="dataPedido")
    note: str | None = Field(alias="observacao")
    total: Amount = Field(alias="valorTotal")
    status: str
    items: list[OrderItemResponse] = Field(alias="itens")

    @staticmethod
    def from_dto(dto: OrderDTO) -> OrderResponse:
        return OrderResponse(
            id=dto.id,
            customer_name=dto.customer_name,
            created_at=dto.created_at,
            note=dto.note,
            total=dto.total,
            status=dto.status,
            items=[OrderItemResponse.from_dto(item) for item in dto.items],
        )
