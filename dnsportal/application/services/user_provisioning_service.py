"""Admin provisioning: create and list user accounts."""

from __future__ import annotations

from dnsportal.application.dtos.user import UserResult
from dnsportal.application.interfaces.repositories import IUserRepository
from dnsportal.domain.exceptions import UserAlreadyExistsException
from dnsportal.shared.logging import get_logger

logger = get_logger(__name__)


class UserProvisioningService:
    """Create users bound to an endpoint id; list all users."""

    def __init__(self, user_repo: IUserRepository) -> None:
        self._user_repo = user_repo

    async def create_user(
        self, username: str, password: str, endpoint_id: str
    ) -> UserResult:
        """Create an active user.

        The pre-check gives the friendly error; the unique constraints on
        username and endpoint_id still decide concurrent inserts, and the
        repository maps that violation to the same exception.

        Raises:
            UserAlreadyExistsException: username or endpoint_id is taken.
        """
        if await self._user_repo.exists_with_username_or_endpoint(username, endpoint_id):
            raise UserAlreadyExistsException()
        user = await self._user_repo.create_user(username, password, endpoint_id)
        logger.info("Provisioned user %s", user.id)
        return user

    async def list_users(self) -> list[UserResult]:
        return await self._user_repo.list_users()
