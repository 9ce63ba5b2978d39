"""Global exception handlers for standardized error responses.

Catches domain errors, HTTPException, RequestValidationError, and unhandled
exceptions to return a consistent JSON error format with request correlation.
Every failure body carries a top-level ``message``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from primekart.middleware.error_codes import ErrorCode, get_error_code
from primekart.middleware.request_logging import REQUEST_ID_HEADER
from primekart.services.exceptions import PrimeKartError, UnauthenticatedError

logger = logging.getLogger("primekart.exception")


def build_error_response(
    request: Request,
    status_code: int,
    code: ErrorCode,
    message: str,
    details: list[dict[str, Any]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build standardized error response."""
    request_id = getattr(request.state, "request_id", None)

    body: dict[str, Any] = {
        "success": False,
        "message": message,
        "error": {
            "code": code.value,
            "message": message,
            "request_id": request_id,
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    if details:
        body["error"]["details"] = details

    headers = dict(headers or {})
    if request_id:
        headers[REQUEST_ID_HEADER] = request_id

    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def primekart_exception_handler(request: Request, exc: PrimeKartError) -> JSONResponse:
    """Handle domain errors raised by services and auth dependencies."""
    headers = None
    if isinstance(exc, UnauthenticatedError):
        headers = {"WWW-Authenticate": "Bearer"}

    return build_error_response(
        request=request,
        status_code=exc.status_code,
        code=get_error_code(exc.status_code),
        message=exc.message,
        headers=headers,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle framework HTTP errors (unknown routes, wrong methods)."""
    error_code = get_error_code(exc.status_code)

    # Log server errors
    if exc.status_code >= 500:
        logger.error(
            "HTTPException status=%s detail=%s request_id=%s",
            exc.status_code,
            exc.detail,
            getattr(request.state, "request_id", None),
        )

    return build_error_response(
        request=request,
        status_code=exc.status_code,
        code=error_code,
        message=str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request schema violations as invalid input, with field-level details."""
    details = []
    for error in exc.errors():
        loc = " -> ".join(str(x) for x in error.get("loc", []))
        details.append(
            {
                "field": loc,
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "value_error"),
            }
        )

    return build_error_response(
        request=request,
        status_code=status.HTTP_400_BAD_REQUEST,
        code=ErrorCode.INVALID_INPUT,
        message="Invalid request data",
        details=details,
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions - returns 500 with minimal info."""
    request_id = getattr(request.state, "request_id", None)

    # Log full exception for debugging
    logger.exception(
        "Unhandled exception request_id=%s path=%s",
        request_id,
        request.url.path,
    )

    return build_error_response(
        request=request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code=ErrorCode.INTERNAL_ERROR,
        message="Internal server error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PrimeKartError, primekart_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
