"""
HTTP error translation.

Policy:
- unknown path            -> 404, plain text
- known path, bad method  -> 405, JSON {"error": ...}
- malformed request body  -> 500, JSON {"error", "details"}
- database failure        -> 500, JSON {"error", "details"} (driver message exposed)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import db

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Recurso no encontrado"
METHOD_NOT_ALLOWED_MESSAGE = "Método no permitido"
INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


def _internal_error(detail: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE, "details": detail},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    headers = getattr(exc, "headers", None)
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=exc.status_code, headers=headers)

    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": METHOD_NOT_ALLOWED_MESSAGE},
            headers=headers,
        )

    # Services may hand over a ready-made body.
    if isinstance(exc.detail, dict):
        return JSONResponse(status_code=exc.status_code, content=exc.detail, headers=headers)

    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Unparseable bodies share the 500 shape of database failures.
    logger.warning("invalid_body method=%s path=%s", request.method, request.url.path)
    return _internal_error(jsonable_encoder(exc.errors()))


async def database_exception_handler(request: Request, exc: db.DatabaseError) -> JSONResponse:
    logger.exception("database_error method=%s path=%s", request.method, request.url.path)
    return _internal_error(str(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    return _internal_error(str(exc))


def install(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(db.DatabaseError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
