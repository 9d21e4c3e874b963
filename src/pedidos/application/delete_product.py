"""Application service: Delete Product use case.

Existing order items keep their product ID and name snapshot; there is
no cascade from the catalog to orders.
"""

from __future__ import annotations

import logging

from pedidos.domain.exceptions import EntityNotFoundError
from pedidos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", "id", product_id)
        self._product_repo.delete(product)
        logger.info("Product %s deleted", product_id)
