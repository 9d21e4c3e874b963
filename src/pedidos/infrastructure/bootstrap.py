"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from functools import lru_cache

from sqlalchemy.orm import Session, sessionmaker

from pedidos.domain.repository.order_item_repository import OrderItemRepository
from pedidos.domain.repository.order_repository import OrderRepository
from pedidos.domain.repository.product_repository import ProductRepository
from pedidos.infrastructure.config import load_settings
from pedidos.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    init_db,
    session_scope,
)
from pedidos.infrastructure.persistence.sqlalchemy_order_item_repository import (
    SqlAlchemyOrderItemRepository,
)
from pedidos.infrastructure.persistence.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from pedidos.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)


@dataclass(frozen=True)
class Repositories:
    """Every repository, bound to one session (one transaction)."""

    products: ProductRepository
    orders: OrderRepository
    items: OrderItemRepository

    @staticmethod
    def for_session(session: Session) -> Repositories:
        return Repositories(
            products=SqlAlchemyProductRepository(session),
            orders=SqlAlchemyOrderRepository(session),
            items=SqlAlchemyOrderItemRepository(session),
        )


@lru_cache(maxsize=1)
def default_session_factory() -> sessionmaker[Session]:
    """Session factory for the configured database, tables created on first use."""
    settings = load_settings()
    engine = build_engine(settings.database_url, echo=settings.sql_echo)
    init_db(engine)
    return build_session_factory(engine)


@contextmanager
def repositories(
    session_factory: sessionmaker[Session] | None = None,
) -> Iterator[Repositories]:
    """Open a transaction and hand out repositories bound to it.

    Commits when the block completes, rolls back if it raises.
    """
    with session_scope(session_factory or default_session_factory()) as session:
        yield Repositories.for_session(session)
