"""User repository. Interface methods return application DTOs (no password hash)."""

from __future__ import annotations

import asyncio

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dnsportal.application.dtos.user import UserResult
from dnsportal.domain.exceptions import UserAlreadyExistsException
from dnsportal.infrastructure.persistence.models.user import User
from dnsportal.infrastructure.persistence.repositories.base import BaseRepository
from dnsportal.infrastructure.security.password import (
    get_password_hash,
    verify_dummy_password,
    verify_password,
)


def _user_to_result(u: User, *, with_created_at: bool = False) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        username=u.username,
        endpoint_id=u.endpoint_id,
        is_active=u.is_active,
        created_at=u.created_at if with_created_at else None,
    )


class UserRepository(BaseRepository[User]):
    """User repository: lookups, password check, create, list, activation."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_id(self, user_id: str) -> UserResult | None:
        # Projected columns only: the guard must never load the hash.
        result = await self.db.execute(
            select(User.id, User.username, User.endpoint_id, User.is_active).where(
                User.id == user_id
            )
        )
        row = result.one_or_none()
        if row is None:
            return None
        return UserResult(
            id=row.id,
            username=row.username,
            endpoint_id=row.endpoint_id,
            is_active=row.is_active,
        )

    async def get_by_username(self, username: str) -> UserResult | None:
        user = await self.get_model_by_username(username)
        return _user_to_result(user) if user else None

    async def check_password(self, user_id: str | None, password: str) -> bool:
        user = await self.get_model_by_id(user_id) if user_id else None
        if user is None:
            return await asyncio.to_thread(verify_dummy_password, password)
        return await asyncio.to_thread(verify_password, password, user.password_hash)

    async def exists_with_username_or_endpoint(
        self, username: str, endpoint_id: str
    ) -> bool:
        result = await self.db.execute(
            select(User.id)
            .where(or_(User.username == username, User.endpoint_id == endpoint_id))
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def create_user(
        self, username: str, password: str, endpoint_id: str
    ) -> UserResult:
        """Create an active user; raise UserAlreadyExistsException on unique constraint violation."""
        hashed = await asyncio.to_thread(get_password_hash, password)
        user = User(
            username=username,
            password_hash=hashed,
            endpoint_id=endpoint_id,
            is_active=True,
        )
        try:
            created = await self.create(user)
        except IntegrityError:
            raise UserAlreadyExistsException() from None
        return _user_to_result(created)

    async def list_users(self) -> list[UserResult]:
        result = await self.db.execute(select(User).order_by(User.created_at.desc()))
        return [_user_to_result(u, with_created_at=True) for u in result.scalars().all()]

    async def set_active(self, username: str, is_active: bool) -> UserResult | None:
        user = await self.get_model_by_username(username)
        if user is None:
            return None
        user.is_active = is_active
        updated = await self.update(user)
        return _user_to_result(updated)
