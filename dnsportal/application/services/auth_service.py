"""Credential login for users and admins.

Client-visible messages never tell "no such account" apart from "wrong
password" for admins, nor "no such account" from "inactive" for users.
"""

from __future__ import annotations

from dnsportal.application.dtos.user import UserLogin
from dnsportal.application.interfaces.repositories import (
    IAdminRepository,
    IUserRepository,
)
from dnsportal.application.interfaces.services import ITokenIssuer
from dnsportal.domain.exceptions import AuthenticationException, ValidationException
from dnsportal.shared.logging import get_logger

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
INVALID_OR_INACTIVE = "Invalid credentials or inactive account"


class AuthService:
    """Exchange username/password for a session token."""

    def __init__(
        self,
        user_repo: IUserRepository,
        admin_repo: IAdminRepository,
        tokens: ITokenIssuer,
    ) -> None:
        self._user_repo = user_repo
        self._admin_repo = admin_repo
        self._tokens = tokens

    async def login_user(self, username: str | None, password: str | None) -> UserLogin:
        if not username or not password:
            raise ValidationException("Username and password required")
        user = await self._user_repo.get_by_username(username)
        if user is None or not user.is_active:
            # Same bcrypt cost as a real check so timing does not reveal the account.
            await self._user_repo.check_password(None, password)
            logger.info("User login rejected: unknown or inactive account")
            raise AuthenticationException(INVALID_OR_INACTIVE)
        if not await self._user_repo.check_password(user.id, password):
            logger.info("User login rejected: bad password for user %s", user.id)
            raise AuthenticationException(INVALID_CREDENTIALS)
        token = self._tokens.issue_user_token(user.id, user.username)
        logger.info("User %s logged in", user.id)
        return UserLogin(token=token, user=user)

    async def login_admin(self, username: str | None, password: str | None) -> str:
        if not username or not password:
            raise AuthenticationException(INVALID_CREDENTIALS)
        admin = await self._admin_repo.authenticate(username, password)
        if admin is None:
            logger.info("Admin login rejected")
            raise AuthenticationException(INVALID_CREDENTIALS)
        logger.info("Admin %s logged in", admin.id)
        return self._tokens.issue_admin_token(admin.id)
