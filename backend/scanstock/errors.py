# backend/scanstock/errors.py
"""
Error rendering for the HTTP API.

Every error leaves the service as {"message": ..., "field": ...}, with
"field" only present for validation failures that point at an input.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def error_body(message: str, field: Optional[str] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": message}
    if field:
        body["field"] = field
    return body


def _field_path(loc: Sequence[Any]) -> Optional[str]:
    parts = list(loc)
    if parts and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(str(part) for part in parts) or None


def first_validation_error(errors: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    """Reduce a list of pydantic errors to the first one, as an error body."""
    if not errors:
        return error_body("Invalid request")
    first = errors[0]
    message = first.get("msg") or "Invalid request"
    if first.get("type") == "json_invalid":
        return error_body(message)
    return error_body(message, _field_path(first.get("loc") or ()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=first_validation_error(exc.errors()),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
