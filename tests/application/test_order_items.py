"""Integration tests for the standalone order item use cases."""

from decimal import Decimal

import pytest

from pedidos.application.add_order_item import AddOrderItemHandler
from pedidos.application.create_order import CreateOrderHandler
from pedidos.application.delete_order_item import DeleteOrderItemHandler
from pedidos.application.dto import OrderItemSpec
from pedidos.application.order_item_queries import OrderItemQueryHandler
from pedidos.application.update_order_item import UpdateOrderItemHandler
from pedidos.application.update_order_status import UpdateOrderStatusHandler
from pedidos.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from pedidos.domain.model.order import OrderStatus
from pedidos.domain.model.product import Product
from pedidos.domain.model.value_objects import Money
from tests.fakes import (
    FakeOrderItemRepository,
    FakeOrderRepository,
    FakeProductRepository,
)


def _setup() -> tuple[int, FakeOrderRepository, FakeOrderItemRepository, FakeProductRepository]:
    """One PENDING order holding 2 Widgets (item #1); Widget stock ends at 8."""
    order_repo = FakeOrderRepository()
    item_repo = FakeOrderItemRepository(order_repo)
    product_repo = FakeProductRepository([
        Product(id=1, name="Widget", price=Money.of("15.00"), stock_quantity=10),
        Product(id=2, name="Gadget", price=Money.of("25.00"), stock_quantity=3),
    ])
    dto = CreateOrderHandler(order_repo, product_repo).handle("Alice", [OrderItemSpec(1, 2)])
    return dto.id, order_repo, item_repo, product_repo


class TestAddOrderItem:

    def test_adds_item_and_reserves_stock(self):
        order_id, order_repo, _, product_repo = _setup()
        dto = AddOrderItemHandler(order_repo, product_repo).handle(order_id, 2, 3)
        assert dto.order_id == order_id
        assert dto.total == Decimal("75.00")
        assert order_repo.get_by_id(order_id).total == Money.of("105.00")
        assert product_repo.get_by_id(2).stock_quantity == 0

    def test_insufficient_stock(self):
        order_id, order_repo, _, product_repo = _setup()
        with pytest.raises(InsufficientStockError):
            AddOrderItemHandler(order_repo, product_repo).handle(order_id, 2, 4)
        assert len(order_repo.get_by_id(order_id).items) == 1

    def test_unknown_order(self):
        _, order_repo, _, product_repo = _setup()
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            AddOrderItemHandler(order_repo, product_repo).handle(99, 1, 1)

    def test_non_pending_order(self):
        order_id, order_repo, _, product_repo = _setup()
        UpdateOrderStatusHandler(order_repo).handle(order_id, OrderStatus.CANCELLED)
        with pytest.raises(ValidationError, match="non-pending"):
            AddOrderItemHandler(order_repo, product_repo).handle(order_id, 1, 1)


class TestUpdateOrderItem:

    def test_increases_quantity(self):
        order_id, order_repo, item_repo, product_repo = _setup()
        dto = UpdateOrderItemHandler(order_repo, item_repo, product_repo).handle(1, 5)
        assert dto.quantity == 5
        assert dto.total == Decimal("75.00")
        assert order_repo.get_by_id(order_id).total == Money.of("75.00")
        assert product_repo.get_by_id(1).stock_quantity == 5

    def test_decreases_quantity(self):
        _, order_repo, item_repo, product_repo = _setup()
        UpdateOrderItemHandler(order_repo, item_repo, product_repo).handle(1, 1)
        assert product_repo.get_by_id(1).stock_quantity == 9

    def test_keeps_unit_price_snapshot(self):
        _, order_repo, item_repo, product_repo = _setup()
        widget = product_repo.get_by_id(1)
        widget.update("Widget", None, Money.of("99.00"), widget.stock_quantity)
        dto = UpdateOrderItemHandler(order_repo, item_repo, product_repo).handle(1, 3)
        assert dto.unit_price == Decimal("15.00")

    def test_insufficient_stock_changes_nothing(self):
        _, order_repo, item_repo, product_repo = _setup()
        with pytest.raises(InsufficientStockError):
            UpdateOrderItemHandler(order_repo, item_repo, product_repo).handle(1, 11)
        assert item_repo.get_by_id(1).quantity.value == 2
        assert product_repo.get_by_id(1).stock_quantity == 8

    def test_unknown_item(self):
        _, order_repo, item_repo, product_repo = _setup()
        with pytest.raises(EntityNotFoundError, match="OrderItem not found"):
            UpdateOrderItemHandler(order_repo, item_repo, product_repo).handle(42, 1)


class TestDeleteOrderItem:

    def test_removes_item_and_restores_stock(self):
        order_id, order_repo, item_repo, product_repo = _setup()
        DeleteOrderItemHandler(order_repo, item_repo, product_repo).handle(1)
        assert item_repo.get_by_id(1) is None
        assert order_repo.get_by_id(order_id).total == Money.zero()
        assert product_repo.get_by_id(1).stock_quantity == 10

    def test_non_pending_order(self):
        order_id, order_repo, item_repo, product_repo = _setup()
        UpdateOrderStatusHandler(order_repo).handle(order_id, OrderStatus.APPROVED)
        with pytest.raises(ValidationError, match="non-pending"):
            DeleteOrderItemHandler(order_repo, item_repo, product_repo).handle(1)


class TestOrderItemQueries:

    def test_lookups(self):
        order_id, order_repo, item_repo, product_repo = _setup()
        AddOrderItemHandler(order_repo, product_repo).handle(order_id, 2, 1)
        queries = OrderItemQueryHandler(item_repo)
        assert len(queries.list_all()) == 2
        assert len(queries.list_by_order(order_id)) == 2
        assert [i.product_id for i in queries.list_by_product(2)] == [2]
        assert queries.get(1).product_name == "Widget"

    def test_get_unknown(self):
        _, _, item_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            OrderItemQueryHandler(item_repo).get(7)
