"""Application service: Product queries (read-only)."""

from __future__ import annotations

from pedidos.application.dto import ProductDTO, product_to_dto
from pedidos.domain.exceptions import EntityNotFoundError
from pedidos.domain.repository.product_repository import ProductRepository


class ProductQueryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def list_all(self) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.list_all()]

    def get(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", "id", product_id)
        return product_to_dto(product)

    def search_by_name(self, fragment: str) -> list[ProductDTO]:
        """Case-insensitive substring match on the product name."""
        return [product_to_dto(p) for p in self._product_repo.search_by_name(fragment)]
