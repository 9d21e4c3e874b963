"""Application service: Decrement Stock use case."""

from __future__ import annotations

from pedidos.application.dto import ProductDTO, product_to_dto
from pedidos.domain.repository.product_repository import ProductRepository
from pedidos.domain.service.stock_reservation_service import (
    StockReservationService,
)


class DecrementStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, quantity: int) -> ProductDTO:
        """Take *quantity* units out of a product's stock.

        Raises InsufficientStockError (a ValidationError) and leaves the
        stock untouched if fewer than *quantity* units are available.
        """
        svc = StockReservationService(self._product_repo)
        product = svc.decrement(product_id, quantity)
        return product_to_dto(product)
