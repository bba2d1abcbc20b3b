"""Admin repository. Admins are only created from the command line."""

from __future__ import annotations

import asyncio

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dnsportal.application.dtos.user import AdminResult
from dnsportal.domain.exceptions import AdminAlreadyExistsException
from dnsportal.infrastructure.persistence.models.admin import Admin
from dnsportal.infrastructure.persistence.repositories.base import BaseRepository
from dnsportal.infrastructure.security.password import (
    get_password_hash,
    verify_dummy_password,
    verify_password,
)


def _admin_to_result(a: Admin) -> AdminResult:
    return AdminResult(id=a.id, username=a.username)


class AdminRepository(BaseRepository[Admin]):
    """Admin repository: lookup, authenticate, create."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Admin)

    async def get_by_id(self, admin_id: str) -> AdminResult | None:
        admin = await self.get_model_by_id(admin_id)
        return _admin_to_result(admin) if admin else None

    async def authenticate(self, username: str, password: str) -> AdminResult | None:
        admin = await self.get_model_by_username(username)
        if not admin:
            await asyncio.to_thread(verify_dummy_password, password)
            return None
        if not await asyncio.to_thread(verify_password, password, admin.password_hash):
            return None
        return _admin_to_result(admin)

    async def create_admin(self, username: str, password: str) -> AdminResult:
        hashed = await asyncio.to_thread(get_password_hash, password)
        try:
            created = await self.create(Admin(username=username, password_hash=hashed))
        except IntegrityError:
            raise AdminAlreadyExistsException(username) from None
        return _admin_to_result(created)
