"""Turn uncaught exceptions into the JSON 500 inside the middleware stack.

Starlette's own Exception handler runs in ServerErrorMiddleware, outside every
added middleware, so its response would carry no security, CORS or request-id
headers. Added first, this layer sits innermost and the 500 travels back out
through all of them. Raw ASGI.
"""

from typing import Callable

from dnsportal.core.exception_handlers import internal_error_response


def UnhandledErrorMiddleware(app: Callable) -> Callable:
    """Answer uncaught exceptions with internal_error_response(). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        response_started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        except Exception as exc:
            # Too late for a clean 500 once headers are out.
            if response_started:
                raise
            await internal_error_response(exc)(scope, receive, send)

    return asgi_app
