"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQLAlchemy, in-memory)
live in the infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pedidos.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int, lock: bool = False) -> Product | None:
        """Return a product by its ID, or None if not found.

        With ``lock=True`` the row is locked for the rest of the current
        transaction, for read-modify-write of the stock quantity.
        """

    @abstractmethod
    def search_by_name(self, fragment: str) -> list[Product]:
        """Return products whose name contains *fragment*, ignoring case."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID to new ones."""

    @abstractmethod
    def delete(self, product: Product) -> None:
        """Remove a product from the catalog."""
