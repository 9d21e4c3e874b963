"""HTTP endpoints for the Product aggregate."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from pedidos.application.add_product import AddProductHandler
from pedidos.application.delete_product import DeleteProductHandler
from pedidos.application.product_queries import ProductQueryHandler
from pedidos.application.update_product import UpdateProductHandler
from pedidos.infrastructure.bootstrap import Repositories
from pedidos.infrastructure.web.dependencies import get_repositories
from pedidos.infrastructure.web.schemas import ProductRequest, ProductResponse

router = APIRouter(prefix="/api/produtos", tags=["Produtos"])


@router.get("", response_model=list[ProductResponse])
def list_products(repos: Repositories = Depends(get_repositories, scope="function")):
    """List every product in the catalog."""
    return [ProductResponse.from_dto(p) for p in ProductQueryHandler(repos.products).list_all()]


@router.get("/buscar", response_model=list[ProductResponse])
def search_products(
    nome: str = Query(..., description="Case-insensitive name fragment."),
    repos: Repositories = Depends(get_repositories, scope="function"),
):
    """Find products whose name contains the given text."""
    handler = ProductQueryHandler(repos.products)
    return [ProductResponse.from_dto(p) for p in handler.search_by_name(nome)]


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, repos: Repositories = Depends(get_repositories, scope="function")):
    return ProductResponse.from_dto(ProductQueryHandler(repos.products).get(product_id))


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(body: ProductRequest, repos: Repositories = Depends(get_repositories, scope="function")):
    dto = AddProductHandler(repos.products).handle(
        name=body.name,
        price=body.price,
        stock_quantity=body.stock_quantity,
        description=body.description,
    )
    return ProductResponse.from_dto(dto)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    body: ProductRequest,
    repos: Repositories = Depends(get_repositories, scope="function"),
):
    """Replace name, description, price and stock quantity."""
    dto = UpdateProductHandler(repos.products).handle(
        product_id=product_id,
        name=body.name,
        price=body.price,
        stock_quantity=body.stock_quantity,
        description=body.description,
    )
    return ProductResponse.from_dto(dto)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, repos: Repositories = Depends(get_repositories, scope="function")):
    DeleteProductHandler(repos.products).handle(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
