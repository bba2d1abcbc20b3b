"""Security hardening tests: security headers, CORS, rate limit, 500 without traceback."""

import json
from unittest.mock import patch

from httpx import AsyncClient

from dnsportal.core.exception_handlers import _generic_exception_handler
from dnsportal.middleware.security_headers import DEFAULT_HEADERS


async def test_security_headers_on_every_response(client: AsyncClient) -> None:
    for path in ("/api/health", "/api/profile", "/api/nope"):
        response = await client.get(path)
        for name, value in DEFAULT_HEADERS.items():
            assert response.headers.get(name) == value, (path, name)


async def test_request_id_generated_and_forwarded(client: AsyncClient) -> None:
    generated = await client.get("/api/health")
    assert generated.headers.get("X-Request-ID")
    forwarded = await client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert forwarded.headers["X-Request-ID"] == "abc-123"


async def test_request_id_with_unsafe_characters_is_replaced(client: AsyncClient) -> None:
    response = await client.get(
        "/api/health", headers={"X-Request-ID": "bad id\\nwith newline"}
    )
    assert response.headers["X-Request-ID"] != "bad id\\nwith newline"


async def test_cors_allows_configured_origin_with_credentials(client: AsyncClient) -> None:
    response = await client.options(
        "/api/auth/login",
        headers={
            "Origin": "http://frontend.test",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://frontend.test"
    assert response.headers["access-control-allow-credentials"] == "true"


async def test_cors_rejects_other_origins(client: AsyncClient) -> None:
    response = await client.get(
        "/api/health", headers={"Origin": "http://evil.test"}
    )
    assert "access-control-allow-origin" not in response.headers


async def test_rate_limit_rejects_101st_request_in_window(client: AsyncClient) -> None:
    for _ in range(100):
        ok = await client.get("/api/health")
        assert ok.status_code == 200
    limited = await client.get("/api/health")
    assert limited.status_code == 429
    assert limited.json()["error"] == "Too many requests from this IP"


async def test_rate_limit_counts_across_routes(client: AsyncClient, gateway) -> None:
    for _ in range(100):
        await client.get("/api/health")
    response = await client.post(
        "/api/auth/login", json={"username": "a", "password": "b"}
    )
    assert response.status_code == 429


def test_500_response_does_not_include_details_when_debug_false() -> None:
    """With debug=False, generic exception handler returns a safe message."""

    class FakeRequest:
        pass

    with patch("dnsportal.core.exception_handlers.get_settings") as m_get_settings:
        m_get_settings.return_value.debug = False
        response = _generic_exception_handler(
            FakeRequest(), ValueError("SELECT * FROM app_user")
        )
    body = json.loads(response.body.decode())
    assert response.status_code == 500
    assert body == {"error": "Internal server error", "code": "INTERNAL_ERROR"}


async def test_request_id_longer_than_64_chars_is_replaced(client: AsyncClient) -> None:
    long_id = "a" * 65
    response = await client.get("/api/health", headers={"X-Request-ID": long_id})
    assert response.headers["X-Request-ID"] != long_id


async def test_unhandled_error_response_carries_stack_headers(
    client: AsyncClient, user_headers: dict[str, str], gateway
) -> None:
    """An uncaught exception becomes a JSON 500 that still passes every header layer."""
    gateway.error = RuntimeError("SELECT secret FROM app_user")
    response = await client.get(
        "/api/profile",
        headers={**user_headers, "Origin": "http://frontend.test"},
    )
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "code": "INTERNAL_ERROR"}
    for name, value in DEFAULT_HEADERS.items():
        assert response.headers.get(name) == value, name
    assert response.headers["access-control-allow-origin"] == "http://frontend.test"
    assert response.headers.get("X-Request-ID")


async def test_rate_limit_applies_to_authenticated_routes(
    client: AsyncClient, user_headers: dict[str, str], admin_headers: dict[str, str]
) -> None:
    for _ in range(50):
        await client.get("/api/profile", headers=user_headers)
        await client.get("/api/admin/users", headers=admin_headers)
    limited = await client.get("/api/profile", headers=user_headers)
    assert limited.status_code == 429
    assert limited.json() == {
        "error": "Too many requests from this IP",
        "code": "RATE_LIMITED",
    }
