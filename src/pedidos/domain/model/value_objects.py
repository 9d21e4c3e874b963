"""Money and Quantity, the two value types prices and order lines are built from.

Both are frozen dataclasses: equal when their values are equal, and
impossible to construct in an invalid state.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pedidos.domain.exceptions import ValidationError


@dataclass(frozen=True, order=True)
class Money:
    """A non-negative amount in reais, kept as a Decimal.

    Ordering compares amounts, so ``price <= Money.zero()`` reads as it
    would on plain numbers.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        """Price of *factor* units; only whole quantities make sense here."""
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __str__(self) -> str:
        return f"R$ {self.amount:.2f}"

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Build from user input; floats go through ``str`` to avoid binary noise."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """How many units of a product an order line holds (always >= 1)."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be greater than zero")

    def __str__(self) -> str:
        return str(self.value)
