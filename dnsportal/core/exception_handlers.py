"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses. Every error body has the shape
{"error": <message>, "code": <error_code>}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from dnsportal.core.config import get_settings
from dnsportal.core.limiter import RATE_LIMIT_MESSAGE
from dnsportal.domain.exceptions import PortalException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status. Duplicates are 400 (not 409) on purpose.
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "USER_ALREADY_EXISTS": 400,
    "ADMIN_ALREADY_EXISTS": 400,
    "AUTHENTICATION_ERROR": 401,
    "AUTHORIZATION_ERROR": 403,
    "INVALID_TOKEN": 403,
    "UPSTREAM_ERROR": 500,
}


def _portal_exception_handler(request: Request, exc: PortalException) -> JSONResponse:
    """Return JSON from PortalException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with validation error details (field locations and messages)."""
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request",
            "code": "VALIDATION_ERROR",
            "details": details,
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (404, 405, ...)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "code": "HTTP_ERROR"},
        headers=getattr(exc, "headers", None),
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return 429 before any handler runs. Sync: SlowAPIMiddleware calls it directly."""
    logger.warning("Rate limit exceeded for %s", request.client.host if request.client else "?")
    return JSONResponse(
        status_code=429,
        content={"error": RATE_LIMIT_MESSAGE, "code": "RATE_LIMITED"},
    )


def internal_error_response(exc: Exception) -> JSONResponse:
    """Log exc with traceback and build the 500 body; detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    detail: Any = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": detail, "code": "INTERNAL_ERROR"},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for errors that reach ServerErrorMiddleware."""
    return internal_error_response(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""
    app.add_exception_handler(PortalException, _portal_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
