"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories, no database.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from pedidos.application.create_order import CreateOrderHandler
from pedidos.application.dto import OrderItemSpec
from pedidos.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from pedidos.domain.model.order import OrderStatus
from pedidos.domain.model.product import Product
from pedidos.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _setup(
    products: list[Product] | None = None,
) -> tuple[CreateOrderHandler, FakeOrderRepository, FakeProductRepository]:
    """Build handler with fake repos, optionally pre-loaded with products."""
    if products is None:
        products = [
            Product(id=1, name="Widget", price=Money.of("15.00"), stock_quantity=10),
            Product(id=2, name="Gadget", price=Money.of("25.00"), stock_quantity=10),
            Product(id=3, name="Scarce", price=Money.of("5.00"), stock_quantity=1),
        ]
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository(products)
    handler = CreateOrderHandler(order_repo, product_repo)
    return handler, order_repo, product_repo


class TestCreateOrderHappyPath:

    def test_creates_order_with_correct_total(self):
        handler, _, _ = _setup()
        dto = handler.handle("Alice", [
            OrderItemSpec(1, 3),
            OrderItemSpec(2, 5),
        ])
        assert dto.total == Decimal("170.00")
        assert dto.status == "PENDING"
        assert dto.customer_name == "Alice"
        assert len(dto.items) == 2

    def test_decrements_stock(self):
        handler, _, product_repo = _setup()
        handler.handle("Alice", [OrderItemSpec(1, 3)])
        assert product_repo.get_by_id(1).stock_quantity == 7

    def test_assigns_order_and_item_ids(self):
        handler, _, _ = _setup()
        dto = handler.handle("Alice", [OrderItemSpec(1, 1)])
        assert dto.id == 1
        assert dto.items[0].id is not None
        assert dto.items[0].order_id == dto.id

    def test_persists_order(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle("Alice", [OrderItemSpec(1, 1)], note="leave at door")
        saved = order_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.customer_name == "Alice"
        assert saved.note == "leave at door"

    def test_sequential_ids(self):
        handler, _, _ = _setup()
        dto1 = handler.handle("Alice", [OrderItemSpec(1, 1)])
        dto2 = handler.handle("Bob", [OrderItemSpec(2, 1)])
        assert dto2.id == dto1.id + 1

    def test_accepts_explicit_status_and_date(self):
        handler, _, _ = _setup()
        moment = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        dto = handler.handle(
            "Alice", [OrderItemSpec(1, 1)],
            status=OrderStatus.APPROVED, created_at=moment,
        )
        assert dto.status == "APPROVED"
        assert dto.created_at == moment


class TestCreateOrderPriceLock:

    def test_price_snapshot_at_creation(self):
        handler, order_repo, product_repo = _setup()

        dto = handler.handle("Alice", [OrderItemSpec(1, 1)])
        assert dto.total == Decimal("15.00")

        widget = product_repo.get_by_id(1)
        widget.update(widget.name, None, Money.of("99.99"), widget.stock_quantity)
        product_repo.save(widget)

        saved = order_repo.get_by_id(dto.id)
        assert saved.total == Money.of("15.00")


class TestCreateOrderValidation:

    def test_unknown_product_rejected(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            handler.handle("Alice", [OrderItemSpec(99, 1)])
        assert order_repo.list_all() == []

    def test_non_positive_quantity_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="greater than zero"):
            handler.handle("Alice", [OrderItemSpec(1, -1)])

    def test_empty_items_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle("Alice", [])

    def test_blank_customer_rejected(self):
        handler, _, product_repo = _setup()
        with pytest.raises(ValidationError, match="Customer name is required"):
            handler.handle("", [OrderItemSpec(1, 1)])
        assert product_repo.get_by_id(1).stock_quantity == 10

    def test_insufficient_stock_leaves_every_product_untouched(self):
        handler, order_repo, product_repo = _setup()
        with pytest.raises(InsufficientStockError, match="Scarce"):
            handler.handle("Alice", [OrderItemSpec(1, 2), OrderItemSpec(3, 2)])
        assert product_repo.get_by_id(1).stock_quantity == 10
        assert product_repo.get_by_id(3).stock_quantity == 1
        assert order_repo.list_all() == []
