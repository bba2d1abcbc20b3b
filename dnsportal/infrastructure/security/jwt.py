"""Session token creation and verification (JWT).

Two claim shapes share one signing secret:

- user tokens carry ``userId`` and ``username`` and live 24 hours;
- admin tokens carry ``adminId`` and live 7 days.

verify_token() only checks signature, expiry and structure. Deciding whether
the claims describe a user or an admin is left to the caller (the access
guard), which fails closed when its expected claim is absent.
"""

from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from dnsportal.core.config import get_settings
from dnsportal.domain.entities.principal import (
    ADMIN_ID_CLAIM,
    USER_ID_CLAIM,
    USERNAME_CLAIM,
)
from dnsportal.domain.exceptions import InvalidTokenException
from dnsportal.shared.utils.datetime import utc_now


def create_access_token(data: dict[str, Any], expires_delta: timedelta) -> str:
    """Sign the given claims with exp = now + expires_delta.

    Args:
        data: Claims to encode.
        expires_delta: Token lifetime; negative values produce an already
            expired token.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    now = utc_now()
    to_encode = data.copy()
    to_encode["iat"] = now
    to_encode["exp"] = now + expires_delta
    encoded = jwt.encode(
        to_encode,
        settings.jwt_secret.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )
    return cast(str, encoded)


def issue_user_token(user_id: str, username: str) -> str:
    """Issue a user session token (default lifetime 24h)."""
    settings = get_settings()
    return create_access_token(
        {USER_ID_CLAIM: user_id, USERNAME_CLAIM: username},
        timedelta(hours=settings.user_token_expire_hours),
    )


def issue_admin_token(admin_id: str) -> str:
    """Issue an admin session token (default lifetime 7 days)."""
    settings = get_settings()
    return create_access_token(
        {ADMIN_ID_CLAIM: admin_id},
        timedelta(days=settings.admin_token_expire_days),
    )


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a session token. Returns the claims.

    Raises:
        InvalidTokenException: If the signature is invalid, the token is
            expired or malformed, or it carries no exp claim.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret.get_secret_value(),
            algorithms=[settings.jwt_algorithm],
            options={"require_exp": True},
        )
    except JWTError as e:
        raise InvalidTokenException(f"Invalid token: {e!s}") from e
    return payload
