"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its items by value.
All business invariants are enforced here:

- an item's total is always ``unit_price * quantity``
- an order's total is always the sum of its item totals
- status only moves along the edges of ``ALLOWED_TRANSITIONS``
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pedidos.domain.exceptions import (
    EntityNotFoundError,
    InvalidTransitionError,
    ValidationError,
)
from pedidos.domain.model.product import Product
from pedidos.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    CANCELLED = "CANCELLED"
    DELIVERED = "DELIVERED"

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self]

    def can_transition_to(self, new_status: OrderStatus) -> bool:
        return new_status in ALLOWED_TRANSITIONS[self]


ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.APPROVED, OrderStatus.CANCELLED}),
    OrderStatus.APPROVED: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.CANCELLED: frozenset(),
    OrderStatus.DELIVERED: frozenset(),
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


@dataclass
class OrderItem:
    """One product line within an order.

    ``unit_price`` is a snapshot of the product's price at the moment the
    product was set on the item; later price changes on the catalog never
    reach existing items.  ``total`` is recomputed every time the product,
    quantity or unit price changes, so it can never go stale.
    """

    id: int | None
    product_id: int
    product_name: str
    quantity: Quantity | None
    unit_price: Money | None
    order_id: int | None = None
    total: Money = field(init=False)

    def __post_init__(self) -> None:
        self._recalculate()

    @staticmethod
    def for_product(product: Product, quantity: int) -> OrderItem:
        """Build a new item priced at the product's current price."""
        if product.id is None:
            raise ValidationError("Product must be persisted before it can be ordered")
        return OrderItem(
            id=None,
            product_id=product.id,
            product_name=product.name,
            quantity=Quantity(quantity),
            unit_price=product.price,
        )

    # --- Mutations (each one recomputes the total) ----------------------------

    def set_product(self, product: Product) -> None:
        if product.id is None:
            raise ValidationError("Product must be persisted before it can be ordered")
        self.product_id = product.id
        self.product_name = product.name
        self.unit_price = product.price
        self._recalculate()

    def set_quantity(self, quantity: int) -> None:
        self.quantity = Quantity(quantity)
        self._recalculate()

    def set_unit_price(self, unit_price: Money) -> None:
        self.unit_price = unit_price
        self._recalculate()

    def _recalculate(self) -> None:
        if self.quantity is None or self.unit_price is None:
            self.total = Money.zero()
        else:
            self.total = self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The plain ``__init__`` lets the repository
    reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_name: str
    items: list[OrderItem]
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=utc_now)
    note: str | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        items: list[OrderItem],
        note: str | None = None,
        status: OrderStatus | None = None,
        created_at: datetime | None = None,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        _check_customer_name(customer_name)
        if not items:
            raise ValidationError("Order must contain at least one item")

        order = Order(
            id=None,
            customer_name=customer_name.strip(),
            items=[],
            status=status or OrderStatus.PENDING,
            created_at=as_utc(created_at) if created_at else utc_now(),
            note=note,
        )
        for item in items:
            order.add_item(item)
        return order

    # --- Guards ---------------------------------------------------------------

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    def ensure_pending(self, action: str) -> None:
        if not self.is_pending:
            raise ValidationError(
                f"Cannot {action} a non-pending order "
                f"(order #{self.id} is {self.status.value})"
            )

    # --- State transitions ----------------------------------------------------

    def transition_to(self, new_status: OrderStatus) -> None:
        """Move to *new_status* if the transition table allows it."""
        self.check_transition(new_status)
        self.status = new_status

    def check_transition(self, new_status: OrderStatus) -> None:
        """Raise InvalidTransitionError unless *new_status* is reachable."""
        if not self.status.can_transition_to(new_status):
            if self.status.is_terminal:
                raise InvalidTransitionError(
                    f"Cannot change the status of a {self.status.value} order"
                )
            allowed = " or ".join(
                s.value for s in OrderStatus if s in ALLOWED_TRANSITIONS[self.status]
            )
            raise InvalidTransitionError(
                f"From {self.status.value} the status can only change to {allowed}"
            )

    # --- Details --------------------------------------------------------------

    def update_details(self, customer_name: str, note: str | None) -> None:
        _check_customer_name(customer_name)
        self.customer_name = customer_name.strip()
        self.note = note

    # --- Item collection ------------------------------------------------------

    def add_item(self, item: OrderItem) -> None:
        item.order_id = self.id
        self.items.append(item)

    def remove_item(self, item_id: int) -> OrderItem:
        item = self.find_item(item_id)
        self.items.remove(item)
        item.order_id = None
        return item

    def clear_items(self) -> list[OrderItem]:
        removed, self.items = self.items, []
        for item in removed:
            item.order_id = None
        return removed

    def find_item(self, item_id: int) -> OrderItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise EntityNotFoundError("OrderItem", "id", item_id)

    def assign_id(self, order_id: int) -> None:
        """Called by repositories once the store has generated an id."""
        self.id = order_id
        for item in self.items:
            item.order_id = order_id

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.total
        return result


def _check_customer_name(customer_name: str) -> None:
    if not customer_name or not customer_name.strip():
        raise ValidationError("Customer name is required")
