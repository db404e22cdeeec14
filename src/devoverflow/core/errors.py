"""Centralized exception handlers.

Every error leaving the API is rendered as JSON with a ``status`` of
``"fail"`` (client problem) or ``"error"`` (server problem) and a ``detail``
message. Development mode adds the underlying cause so problems can be
diagnosed from the response; production mode keeps the payload generic.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from devoverflow.core.settings import settings

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Something went wrong"
INVALID_REQUEST_DATA = "Invalid request data"
UNIQUE_VIOLATION = "Duplicate value violates a unique constraint"
CONSTRAINT_VIOLATION = "Request conflicts with existing data"


def _is_unique_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig).lower()
    return "unique" in message or "duplicate key" in message


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render errors raised deliberately by endpoints."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "fail", "detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Render request schema validation failures."""
    content: dict[str, Any] = {"status": "fail", "detail": INVALID_REQUEST_DATA}
    if not settings.is_production:
        content["errors"] = jsonable_encoder(exc.errors())
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=content)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Render store-level constraint violations."""
    if _is_unique_violation(exc):
        status_code = status.HTTP_409_CONFLICT
        detail = UNIQUE_VIOLATION
    else:
        status_code = status.HTTP_400_BAD_REQUEST
        detail = CONSTRAINT_VIOLATION

    logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    content: dict[str, Any] = {"status": "fail", "detail": detail}
    if settings.is_development:
        content["error"] = str(exc.orig)
    return JSONResponse(status_code=status_code, content=content)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything nobody else caught."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content: dict[str, Any] = {"status": "error", "detail": GENERIC_SERVER_ERROR}
    if settings.is_development:
        content["error"] = f"{type(exc).__name__}: {exc}"
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(IntegrityError, integrity_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
