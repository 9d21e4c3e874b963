"""HTTP endpoints for the Order aggregate."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query, Response, status

from pedidos.application.create_order import CreateOrderHandler
from pedidos.application.delete_order import DeleteOrderHandler
from pedidos.application.order_queries import OrderQueryHandler
from pedidos.application.update_order import UpdateOrderHandler
from pedidos.application.update_order_status import UpdateOrderStatusHandler
from pedidos.domain.model.order import OrderStatus
from pedidos.infrastructure.bootstrap import Repositories
from pedidos.infrastructure.web.dependencies import get_repositories
from pedidos.infrastructure.web.schemas import (
    CreateOrderRequest,
    OrderResponse,
    UpdateOrderRequest,
)

router = APIRouter(prefix="/api/pedidos", tags=["Pedidos"])


@router.get("", response_model=list[OrderResponse])
def list_orders(repos: Repositories = Depends(get_repositories, scope="function")):
    """List every order with its items."""
    return [OrderResponse.from_dto(o) for o in OrderQueryHandler(repos.orders).list_all()]


@router.get("/cliente", response_model=list[OrderResponse])
def search_by_customer(
    cliente: str = Query(..., description="Case-insensitive customer name fragment."),
    repos: Repositories = Depends(get_repositories, scope="function"),
):
    handler = OrderQueryHandler(repos.orders)
    return [OrderResponse.from_dto(o) for o in handler.search_by_customer(cliente)]


@router.get("/periodo", response_model=list[OrderResponse])
def search_by_period(
    inicio: datetime = Query(..., description="ISO-8601 start, inclusive."),
    fim: datetime = Query(..., description="ISO-8601 end, inclusive."),
    repos: Repositories = Depends(get_repositories, scope="function"),
):
    handler = OrderQueryHandler(repos.orders)
    return [OrderResponse.from_dto(o) for o in handler.search_by_period(inicio, fim)]


@router.get("/status/{order_status}", response_model=list[OrderResponse])
def list_by_status(order_status: OrderStatus, repos: Repositories = Depends(get_repositories, scope="function")):
    handler = OrderQueryHandler(repos.orders)
    return [OrderResponse.from_dto(o) for o in handler.list_by_status(order_status)]


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(order_id: int, repos: Repositories = Depends(get_repositories, scope="function")):
    return OrderResponse.from_dto(OrderQueryHandler(repos.orders).get(order_id))


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(body: CreateOrderRequest, repos: Repositories = Depends(get_repositories, scope="function")):
    """Create an order; each item's quantity is taken out of stock."""
    dto = CreateOrderHandler(repos.orders, repos.products).handle(
        customer_name=body.customer_name,
        item_specs=[item.to_spec() for item in body.items],
        note=body.note,
        status=body.status,
        created_at=body.created_at,
    )
    return OrderResponse.from_dto(dto)


@router.put("/{order_id}", response_model=OrderResponse)
def update_order(
    order_id: int,
    body: UpdateOrderRequest,
    repos: Repositories = Depends(get_repositories, scope="function"),
):
    """Update a PENDING order. Omitting ``itens`` keeps the current items."""
    dto = UpdateOrderHandler(repos.orders, repos.products).handle(
        order_id=order_id,
        customer_name=body.customer_name,
        note=body.note,
        status=body.status,
        item_specs=[item.to_spec() for item in body.items] if body.items else None,
    )
    return OrderResponse.from_dto(dto)


@router.patch("/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    order_id: int,
    status_: OrderStatus = Query(..., alias="status"),
    repos: Repositories = Depends(get_repositories, scope="function"),
):
    dto = UpdateOrderStatusHandler(repos.orders).handle(order_id, status_)
    return OrderResponse.from_dto(dto)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(order_id: int, repos: Repositories = Depends(get_repositories, scope="function")):
    """Delete a PENDING order and give its items back to stock."""
    DeleteOrderHandler(repos.orders, repos.products).handle(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
