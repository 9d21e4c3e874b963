"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and map them to
status codes or user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated (maps to HTTP 400)."""


class InsufficientStockError(ValidationError):
    """A stock reservation would leave a product with negative stock."""


class InvalidTransitionError(ValidationError):
    """A requested order status change is not allowed from the current status."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist (maps to HTTP 404)."""

    def __init__(self, entity: str, field: str, value: object) -> None:
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity} not found with {field}: '{value}'")
