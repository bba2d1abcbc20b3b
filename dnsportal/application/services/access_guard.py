"""Access guard: resolve a bearer token to an authenticated principal.

One verify-then-dispatch path serves both principal kinds. Each kind has a
claim shape (the claim field it trusts plus its rejection messages) and a
loader that turns the claimed id into a principal. A token whose claims lack
the expected field is rejected, so an admin token never authenticates a user
request and vice versa.

Every call re-reads the store: deactivating a user takes effect on that
user's next request even though their token has not expired.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from dnsportal.application.interfaces.repositories import (
    IAdminRepository,
    IUserRepository,
)
from dnsportal.domain.entities.principal import (
    ADMIN_ID_CLAIM,
    USER_ID_CLAIM,
    AdminPrincipal,
    Principal,
    PrincipalKind,
    UserPrincipal,
)
from dnsportal.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    InvalidTokenException,
)
from dnsportal.shared.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ClaimShape:
    """What a token must carry to authenticate one principal kind."""

    subject_claim: str
    missing_token_message: str
    invalid_token_message: str
    unknown_subject_message: str


CLAIM_SHAPES: dict[PrincipalKind, ClaimShape] = {
    PrincipalKind.USER: ClaimShape(
        subject_claim=USER_ID_CLAIM,
        missing_token_message="Access token required",
        invalid_token_message="Invalid token",
        unknown_subject_message="Invalid or inactive user",
    ),
    PrincipalKind.ADMIN: ClaimShape(
        subject_claim=ADMIN_ID_CLAIM,
        missing_token_message="Admin token required",
        invalid_token_message="Invalid admin token",
        unknown_subject_message="Invalid admin credentials",
    ),
}


class AccessGuard:
    """Authenticate bearer tokens against the credential store."""

    def __init__(
        self,
        user_repo: IUserRepository,
        admin_repo: IAdminRepository,
        verify: Callable[[str], dict[str, Any]],
    ) -> None:
        self._user_repo = user_repo
        self._admin_repo = admin_repo
        self._verify = verify
        self._loaders: dict[
            PrincipalKind, Callable[[str], Awaitable[Principal | None]]
        ] = {
            PrincipalKind.USER: self._load_user,
            PrincipalKind.ADMIN: self._load_admin,
        }

    async def authenticate(self, token: str | None, kind: PrincipalKind) -> Principal:
        """Return the principal for token, or raise.

        Raises:
            AuthenticationException: No token was presented (401).
            InvalidTokenException: Signature, expiry or claim shape is wrong (403).
            AuthorizationException: The subject is unknown or inactive (403).
        """
        shape = CLAIM_SHAPES[kind]
        if not token:
            raise AuthenticationException(shape.missing_token_message)
        try:
            claims = self._verify(token)
        except InvalidTokenException as e:
            logger.info("Rejected %s token: %s", kind.value, e.message)
            raise InvalidTokenException(shape.invalid_token_message) from None
        subject_id = claims.get(shape.subject_claim)
        if not isinstance(subject_id, str) or not subject_id:
            logger.info("Rejected %s token: missing %s claim", kind.value, shape.subject_claim)
            raise InvalidTokenException(shape.invalid_token_message)
        principal = await self._loaders[kind](subject_id)
        if principal is None:
            logger.info("Rejected %s token: unknown or inactive subject", kind.value)
            raise AuthorizationException(shape.unknown_subject_message)
        return principal

    async def _load_user(self, user_id: str) -> UserPrincipal | None:
        user = await self._user_repo.get_by_id(user_id)
        if user is None or not user.is_active:
            return None
        return UserPrincipal(id=user.id, username=user.username, endpoint_id=user.endpoint_id)

    async def _load_admin(self, admin_id: str) -> AdminPrincipal | None:
        admin = await self._admin_repo.get_by_id(admin_id)
        if admin is None:
            return None
        return AdminPrincipal(id=admin.id, username=admin.username)
