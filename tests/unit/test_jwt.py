"""Tests for session token issue and verification."""

from datetime import timedelta

import pytest
from jose import jwt

from dnsportal.core.config import get_settings
from dnsportal.domain.exceptions import InvalidTokenException
from dnsportal.infrastructure.security.jwt import (
    create_access_token,
    issue_admin_token,
    issue_user_token,
    verify_token,
)


def test_user_token_round_trip() -> None:
    claims = verify_token(issue_user_token("user-1", "alice"))
    assert claims["userId"] == "user-1"
    assert claims["username"] == "alice"
    assert "adminId" not in claims


def test_user_token_lifetime_is_24_hours() -> None:
    claims = verify_token(issue_user_token("user-1", "alice"))
    assert claims["exp"] - claims["iat"] == 24 * 3600


def test_admin_token_carries_only_admin_id() -> None:
    claims = verify_token(issue_admin_token("admin-1"))
    assert claims["adminId"] == "admin-1"
    assert "userId" not in claims
    assert claims["exp"] - claims["iat"] == 7 * 24 * 3600


def test_expired_token_is_rejected() -> None:
    token = create_access_token({"userId": "user-1"}, timedelta(seconds=-1))
    with pytest.raises(InvalidTokenException):
        verify_token(token)


def test_token_signed_with_other_secret_is_rejected() -> None:
    token = jwt.encode(
        {"userId": "user-1", "exp": 4102444800},
        "some-other-secret",
        algorithm=get_settings().jwt_algorithm,
    )
    with pytest.raises(InvalidTokenException):
        verify_token(token)


def test_token_with_swapped_payload_is_rejected() -> None:
    """Claims from one token under another token's signature fail verification."""
    header, _, signature = issue_user_token("user-1", "alice").split(".")
    _, payload, _ = issue_user_token("user-2", "mallory").split(".")
    with pytest.raises(InvalidTokenException):
        verify_token(f"{header}.{payload}.{signature}")


def test_token_without_exp_is_rejected() -> None:
    settings = get_settings()
    token = jwt.encode(
        {"userId": "user-1"},
        settings.jwt_secret.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(InvalidTokenException):
        verify_token(token)


def test_unsigned_token_is_rejected() -> None:
    # alg=none header with a userId payload and empty signature.
    token = "eyJhbGciOiJub25lIiwidHlwIjoiSldUIn0.eyJ1c2VySWQiOiJ1c2VyLTEiLCJleHAiOjQxMDI0NDQ4MDB9."
    with pytest.raises(InvalidTokenException):
        verify_token(token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_rejected(token: str) -> None:
    with pytest.raises(InvalidTokenException):
        verify_token(token)
