"""Tests for POST /api/auth/login (user login)."""

from httpx import AsyncClient

from dnsportal.application.dtos.user import UserResult
from dnsportal.infrastructure.security.jwt import verify_token


async def test_login_success_returns_token_and_user(
    client: AsyncClient, alice: UserResult
) -> None:
    response = await client.post(
        "/api/auth/login", json={"username": "alice", "password": "correct"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["user"] == {
        "id": alice.id,
        "username": "alice",
        "endpointId": "ep-alice",
    }
    claims = verify_token(data["token"])
    assert claims["userId"] == alice.id
    assert claims["username"] == "alice"
    assert "adminId" not in claims


async def test_login_response_never_contains_password_hash(
    client: AsyncClient, alice: UserResult
) -> None:
    response = await client.post(
        "/api/auth/login", json={"username": "alice", "password": "correct"}
    )
    data = response.json()
    assert set(data) == {"token", "user"}
    assert set(data["user"]) == {"id", "username", "endpointId"}


async def test_login_wrong_password_returns_401(
    client: AsyncClient, alice: UserResult
) -> None:
    response = await client.post(
        "/api/auth/login", json={"username": "alice", "password": "wrong"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials"


async def test_login_unknown_user_returns_401_generic(client: AsyncClient) -> None:
    response = await client.post(
        "/api/auth/login", json={"username": "nobody", "password": "whatever"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials or inactive account"


async def test_login_inactive_user_same_message_as_unknown(
    client: AsyncClient, alice: UserResult, user_repo
) -> None:
    await user_repo.set_active("alice", False)
    response = await client.post(
        "/api/auth/login", json={"username": "alice", "password": "correct"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials or inactive account"


async def test_login_missing_fields_returns_400(client: AsyncClient) -> None:
    response = await client.post("/api/auth/login", json={"username": "alice"})
    assert response.status_code == 400
    assert response.json()["error"] == "Username and password required"


async def test_login_empty_body_returns_400(client: AsyncClient) -> None:
    response = await client.post("/api/auth/login", json={})
    assert response.status_code == 400


async def test_login_non_json_body_returns_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/auth/login",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
