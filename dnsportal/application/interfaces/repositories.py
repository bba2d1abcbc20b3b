"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
All types reference application DTOs only; password hashes stay behind these
interfaces.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dnsportal.application.dtos.user import AdminResult, UserResult


class IUserRepository(Protocol):
    """Protocol for the user credential store."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by id (safe projection), or None."""

    async def get_by_username(self, username: str) -> UserResult | None:
        """Return user by username (safe projection), or None."""

    async def check_password(self, user_id: str | None, password: str) -> bool:
        """Return True if password matches the stored hash of user_id.

        An unknown or None user_id is checked against a dummy hash and
        returns False, taking as long as a real check.
        """

    async def exists_with_username_or_endpoint(
        self, username: str, endpoint_id: str
    ) -> bool:
        """Return True if any user has this username or this endpoint id."""

    async def create_user(
        self, username: str, password: str, endpoint_id: str
    ) -> UserResult:
        """Hash password and persist an active user.

        Raises UserAlreadyExistsException on a unique constraint violation.
        """

    async def list_users(self) -> list[UserResult]:
        """Return all users, newest first, with created_at populated."""

    async def set_active(self, username: str, is_active: bool) -> UserResult | None:
        """Set the activation flag; None when the user does not exist."""


class IAdminRepository(Protocol):
    """Protocol for the admin credential store."""

    async def get_by_id(self, admin_id: str) -> AdminResult | None:
        """Return admin by id, or None."""

    async def authenticate(self, username: str, password: str) -> AdminResult | None:
        """Return the admin when username and password match; else None."""

    async def create_admin(self, username: str, password: str) -> AdminResult:
        """Hash password and persist an admin.

        Raises AdminAlreadyExistsException when the username is taken.
        """
