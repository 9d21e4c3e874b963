"""Integration tests for the read-only order queries."""

from datetime import datetime, timezone

import pytest

from pedidos.application.create_order import CreateOrderHandler
from pedidos.application.dto import OrderItemSpec
from pedidos.application.order_queries import OrderQueryHandler
from pedidos.domain.exceptions import EntityNotFoundError, ValidationError
from pedidos.domain.model.order import OrderStatus
from pedidos.domain.model.product import Product
from pedidos.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _setup() -> OrderQueryHandler:
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository([
        Product(id=1, name="Widget", price=Money.of("15.00"), stock_quantity=100),
    ])
    create = CreateOrderHandler(order_repo, product_repo)
    create.handle("Maria Silva", [OrderItemSpec(1, 1)],
                  created_at=datetime(2024, 1, 10, 9, 0, tzinfo=timezone.utc))
    create.handle("João Souza", [OrderItemSpec(1, 2)],
                  created_at=datetime(2024, 2, 20, 18, 0, tzinfo=timezone.utc))
    create.handle("maria oliveira", [OrderItemSpec(1, 3)], status=OrderStatus.APPROVED,
                  created_at=datetime(2024, 3, 5, 12, 0, tzinfo=timezone.utc))
    return OrderQueryHandler(order_repo)


class TestOrderQueries:

    def test_list_all(self):
        assert [o.id for o in _setup().list_all()] == [1, 2, 3]

    def test_get(self):
        assert _setup().get(2).customer_name == "João Souza"

    def test_get_unknown(self):
        with pytest.raises(EntityNotFoundError, match="Order not found with id: '9'"):
            _setup().get(9)

    def test_search_by_customer_is_case_insensitive(self):
        found = _setup().search_by_customer("MARIA")
        assert [o.id for o in found] == [1, 3]

    def test_search_by_period_is_inclusive(self):
        found = _setup().search_by_period(
            datetime(2024, 1, 10, 9, 0, tzinfo=timezone.utc),
            datetime(2024, 2, 20, 18, 0, tzinfo=timezone.utc),
        )
        assert [o.id for o in found] == [1, 2]

    def test_search_by_period_treats_naive_as_utc(self):
        found = _setup().search_by_period(datetime(2024, 3, 1), datetime(2024, 3, 31))
        assert [o.id for o in found] == [3]

    def test_search_by_period_rejects_inverted_range(self):
        with pytest.raises(ValidationError, match="start must not be after"):
            _setup().search_by_period(datetime(2024, 3, 1), datetime(2024, 1, 1))

    def test_list_by_status(self):
        queries = _setup()
        assert [o.id for o in queries.list_by_status(OrderStatus.APPROVED)] == [3]
        assert [o.id for o in queries.list_by_status(OrderStatus.PENDING)] == [1, 2]
        assert queries.list_by_status(OrderStatus.DELIVERED) == []
