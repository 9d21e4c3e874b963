"""Maps exceptions to JSON error responses.

Body shape: ``{"timestamp", "message", "status"}``, or ``{"timestamp",
"errors", "status"}`` when the request itself failed validation.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pedidos.domain.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred"


def _body(status_code: int, **fields: object) -> dict:
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        **fields,
        "status": status_code,
    }


async def handle_not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    logger.warning("%s %s -> 404: %s", request.method, request.url.path, exc)
    code = status.HTTP_404_NOT_FOUND
    return JSONResponse(_body(code, message=str(exc)), status_code=code)


async def handle_bad_request(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, exc)
    code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(_body(code, message=str(exc)), status_code=code)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors: dict[str, str] = {}
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix; keep the field path.
        loc = [str(part) for part in error.get("loc", ())[1:]] or ["request"]
        errors[".".join(loc)] = error.get("msg", "Invalid value")
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, errors)
    code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(_body(code, errors=errors), status_code=code)


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s -> 500", request.method, request.url.path)
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(_body(code, message=INTERNAL_ERROR_MESSAGE), status_code=code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EntityNotFoundError, handle_not_found)
    app.add_exception_handler(ValidationError, handle_bad_request)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
