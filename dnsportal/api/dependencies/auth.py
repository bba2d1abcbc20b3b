"""Auth dependencies: token issuer, login service, and the two route guards."""

from __future__ import annotations

from typing import Annotated, Any, cast

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from dnsportal.api.dependencies.db import get_admin_repo, get_user_repo
from dnsportal.application.interfaces.repositories import (
    IAdminRepository,
    IUserRepository,
)
from dnsportal.application.services.access_guard import AccessGuard
from dnsportal.application.services.auth_service import AuthService
from dnsportal.domain.entities.principal import (
    AdminPrincipal,
    PrincipalKind,
    UserPrincipal,
)
from dnsportal.infrastructure.security.jwt import (
    issue_admin_token,
    issue_user_token,
    verify_token,
)

# auto_error=False: a missing header or a non-Bearer scheme yields None and the
# guard answers with its own 401 message.
_http_bearer = HTTPBearer(auto_error=False)


class AuthSecurity:
    """Token issue/verify provided via DI (no direct infra imports in services)."""

    def issue_user_token(self, user_id: str, username: str) -> str:
        return issue_user_token(user_id, username)

    def issue_admin_token(self, admin_id: str) -> str:
        return issue_admin_token(admin_id)

    def verify(self, token: str) -> dict[str, Any]:
        return verify_token(token)


def get_auth_security() -> AuthSecurity:
    """Token issuer/verifier (composition root)."""
    return AuthSecurity()


def get_auth_service(
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
    admin_repo: Annotated[IAdminRepository, Depends(get_admin_repo)],
    auth_security: Annotated[AuthSecurity, Depends(get_auth_security)],
) -> AuthService:
    """Login service (composition root)."""
    return AuthService(user_repo=user_repo, admin_repo=admin_repo, tokens=auth_security)


def get_access_guard(
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
    admin_repo: Annotated[IAdminRepository, Depends(get_admin_repo)],
    auth_security: Annotated[AuthSecurity, Depends(get_auth_security)],
) -> AccessGuard:
    """Access guard over the credential store (composition root)."""
    return AccessGuard(user_repo=user_repo, admin_repo=admin_repo, verify=auth_security.verify)


def _bearer_token(credentials: HTTPAuthorizationCredentials | None) -> str | None:
    return credentials.credentials if credentials else None


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
) -> UserPrincipal:
    """Require a valid user token for an active user; attach the principal to the request."""
    principal = cast(
        UserPrincipal,
        await guard.authenticate(_bearer_token(credentials), PrincipalKind.USER),
    )
    request.state.principal = principal
    return principal


async def get_current_admin(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
) -> AdminPrincipal:
    """Require a valid admin token; attach the principal to the request."""
    principal = cast(
        AdminPrincipal,
        await guard.authenticate(_bearer_token(credentials), PrincipalKind.ADMIN),
    )
    request.state.principal = principal
    return principal
