"""Access log middleware: one line per request (method, path, status, duration, client).

Also owns the request id: a client-supplied X-Request-ID is kept when it is a
short token of [A-Za-z0-9_-], otherwise a UUID is generated. The id is put in
scope state, echoed on the response and written on the log line. Query
strings are not logged. Raw ASGI.
"""

import re
import time
import uuid
from typing import Callable

from dnsportal.shared.logging import get_logger

logger = get_logger("dnsportal.access")

_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def _request_id(scope: dict, header_name: str) -> str:
    want = header_name.lower().encode()
    for name, value in scope.get("headers", []):
        if name.lower() == want:
            candidate = value.decode("latin-1").strip()
            if _REQUEST_ID_PATTERN.match(candidate):
                return candidate
            break
    return str(uuid.uuid4())


def AccessLogMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Tag the request with an id and log it after the response. Raw ASGI."""
    header_b = header_name.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = time.perf_counter()
        request_id = _request_id(scope, header_name)
        scope.setdefault("state", {})["request_id"] = request_id
        status = 500

        async def send_wrapper(message: dict) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
                message["headers"] = [
                    *message.get("headers", []),
                    (header_b, request_id.encode()),
                ]
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            client = scope.get("client") or ("-", 0)
            logger.info(
                '%s "%s %s" %d %.1fms rid=%s',
                client[0],
                scope.get("method", "-"),
                scope.get("path", "-"),
                status,
                (time.perf_counter() - started) * 1000,
                request_id,
            )

    return asgi_app
