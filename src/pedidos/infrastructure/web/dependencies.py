"""FastAPI dependencies: one transaction per request."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Request

from pedidos.infrastructure.bootstrap import Repositories, repositories


def get_repositories(request: Request) -> Iterator[Repositories]:
    """Repositories bound to a session that commits before the response is sent.

    An exception raised by the endpoint rolls the whole request back,
    including any stock already adjusted.

    Routes depend on this with ``scope="function"`` so a failed commit
    surfaces as an error response instead of a 2xx.
    """
    with repositories(request.app.state.session_factory) as repos:
        yield repos
