"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from sqlalchemy.orm import Session, sessionmaker

from pedidos.infrastructure.bootstrap import default_session_factory
from pedidos.infrastructure.web import order_item_routes, order_routes, product_routes
from pedidos.infrastructure.web.errors import register_error_handlers


def create_app(session_factory: sessionmaker[Session] | None = None) -> FastAPI:
    """Build the app; tests pass their own session factory (e.g. in-memory SQLite)."""
    app = FastAPI(
        title="Sistema de Pedidos",
        description="Products, orders and order items with stock reservation.",
    )
    app.state.session_factory = session_factory or default_session_factory()

    register_error_handlers(app)
    app.include_router(product_routes.router)
    app.include_router(order_routes.router)
    app.include_router(order_item_routes.router)

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok", "service": "pedidos"}

    return app
