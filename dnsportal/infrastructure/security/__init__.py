"""Security: session tokens and password hashing."""

from dnsportal.infrastructure.security.jwt import (
    create_access_token,
    issue_admin_token,
    issue_user_token,
    verify_token,
)
from dnsportal.infrastructure.security.password import (
    get_password_hash,
    verify_dummy_password,
    verify_password,
)

__all__ = [
    "create_access_token",
    "get_password_hash",
    "issue_admin_token",
    "issue_user_token",
    "verify_dummy_password",
    "verify_password",
    "verify_token",
]
