"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See dnsportal.core.lifespan and
dnsportal.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
optionally clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware

from dnsportal.api import api_router
from dnsportal.core.config import get_settings
from dnsportal.core.exception_handlers import register_exception_handlers
from dnsportal.core.lifespan import create_lifespan
from dnsportal.core.limiter import limiter
from dnsportal.middleware import (
    AccessLogMiddleware,
    SecurityHeadersMiddleware,
    UnhandledErrorMiddleware,
)


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: access log (request id) → security headers → CORS → rate limit → uncaught-error 500.
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api")

    return app
