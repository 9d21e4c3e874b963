"""HTTP endpoints for order items, outside their owning order."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from pedidos.application.add_order_item import AddOrderItemHandler
from pedidos.application.delete_order_item import DeleteOrderItemHandler
from pedidos.application.order_item_queries import OrderItemQueryHandler
from pedidos.application.update_order_item import UpdateOrderItemHandler
from pedidos.infrastructure.bootstrap import Repositories
from pedidos.infrastructure.web.dependencies import get_repositories
from pedidos.infrastructure.web.schemas import (
    AddOrderItemRequest,
    OrderItemResponse,
    UpdateOrderItemRequest,
)

router = APIRouter(prefix="/api/itens-pedido", tags=["Itens de pedido"])


@router.get("", response_model=list[OrderItemResponse])
def list_items(repos: Repositories = Depends(get_repositories, scope="function")):
    return [OrderItemResponse.from_dto(i) for i in OrderItemQueryHandler(repos.items).list_all()]


@router.get("/pedido/{order_id}", response_model=list[OrderItemResponse])
def list_items_by_order(order_id: int, repos: Repositories = Depends(get_repositories, scope="function")):
    handler = OrderItemQueryHandler(repos.items)
    return [OrderItemResponse.from_dto(i) for i in handler.list_by_order(order_id)]


@router.get("/produto/{product_id}", response_model=list[OrderItemResponse])
def list_items_by_product(product_id: int, repos: Repositories = Depends(get_repositories, scope="function")):
    handler = OrderItemQueryHandler(repos.items)
    return [OrderItemResponse.from_dto(i) for i in handler.list_by_product(product_id)]


@router.get("/{item_id}", response_model=OrderItemResponse)
def get_item(item_id: int, repos: Repositories = Depends(get_repositories, scope="function")):
    return OrderItemResponse.from_dto(OrderItemQueryHandler(repos.items).get(item_id))


@router.post("", response_model=OrderItemResponse, status_code=status.HTTP_201_CREATED)
def add_item(body: AddOrderItemRequest, repos: Repositories = Depends(get_repositories, scope="function")):
    """Add a line to a PENDING order, reserving its stock."""
    dto = AddOrderItemHandler(repos.orders, repos.products).handle(
        order_id=body.order_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    return OrderItemResponse.from_dto(dto)


@router.put("/{item_id}", response_model=OrderItemResponse)
def update_item(
    item_id: int,
    body: UpdateOrderItemRequest,
    repos: Repositories = Depends(get_repositories, scope="function"),
):
    """Change the quantity of a line on a PENDING order."""
    dto = UpdateOrderItemHandler(repos.orders, repos.items, repos.products).handle(
        item_id=item_id, quantity=body.quantity
    )
    return OrderItemResponse.from_dto(dto)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(item_id: int, repos: Repositories = Depends(get_repositories, scope="function")):
    DeleteOrderItemHandler(repos.orders, repos.items, repos.products).handle(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
