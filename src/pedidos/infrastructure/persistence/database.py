"""SQLAlchemy engine, table mappings and the per-request transaction scope.

Table and column names are the Portuguese names of the relational schema
(``produtos``, ``pedidos``, ``itens_pedido``).  Datetimes are stored as
naive UTC.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Engine,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    create_engine,
    make_url,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    Session,
    mapped_column,
    relationship,
    sessionmaker,
)
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    pass


class ProductRow(Base):
    __tablename__ = "produtos"
    __table_args__ = (
        CheckConstraint("quantidade_estoque >= 0", name="ck_produtos_estoque"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("nome", String(255), index=True)
    description: Mapped[str | None] = mapped_column("descricao", Text, nullable=True)
    price: Mapped[Decimal] = mapped_column("preco", Numeric(12, 2))
    stock_quantity: Mapped[int] = mapped_column("quantidade_estoque", Integer, default=0)


class OrderRow(Base):
    __tablename__ = "pedidos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_name: Mapped[str] = mapped_column("cliente", String(255), index=True)
    created_at: Mapped[datetime] = mapped_column("data_pedido", DateTime(), index=True)
    note: Mapped[str | None] = mapped_column("observacao", Text, nullable=True)
    total: Mapped[Decimal] = mapped_column("valor_total", Numeric(14, 2))
    status: Mapped[str] = mapped_column(String(16), index=True)

    # Removing an item from this list deletes its row.
    items: Mapped[list[OrderItemRow]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemRow.id",
        lazy="selectin",
    )


class OrderItemRow(Base):
    __tablename__ = "itens_pedido"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        "pedido_id", ForeignKey("pedidos.id", ondelete="CASCADE"), index=True
    )
    # No foreign key: products can be deleted without touching past orders.
    product_id: Mapped[int] = mapped_column("produto_id", Integer, index=True)
    product_name: Mapped[str] = mapped_column("nome_produto", String(255))
    quantity: Mapped[int] = mapped_column("quantidade", Integer)
    unit_price: Mapped[Decimal] = mapped_column("preco_unitario", Numeric(12, 2))
    total: Mapped[Decimal] = mapped_column("valor_total", Numeric(14, 2))

    order: Mapped[OrderRow] = relationship(back_populates="items")


def build_engine(database_url: str, echo: bool = False) -> Engine:
    url = make_url(database_url)
    kwargs: dict = {"echo": echo}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every checkout sees an empty DB.
            kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create every table that does not exist yet."""
    Base.metadata.create_all(engine)


@contextmanager
def session_scope(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """One transaction: commit when the block succeeds, roll back on any error."""
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
