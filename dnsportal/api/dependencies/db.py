"""Repository dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dnsportal.infrastructure.persistence.database import get_db, get_db_transactional
from dnsportal.infrastructure.persistence.repositories import (
    AdminRepository,
    UserRepository,
)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User repository for read operations."""
    return UserRepository(db)


async def get_user_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> UserRepository:
    """User repository for writes (transactional)."""
    return UserRepository(db)


async def get_admin_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AdminRepository:
    """Admin repository (read only over HTTP)."""
    return AdminRepository(db)
