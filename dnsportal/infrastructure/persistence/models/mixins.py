"""SQLAlchemy mixins for common model patterns.

Provides: CuidMixin (string primary key), TimestampMixin (created_at,
updated_at), and CredentialMixin (unique username + password hash) shared by
users and admins.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from dnsportal.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class CredentialMixin:
    """Mixin for login credentials. The hash never leaves the repository layer."""

    @declared_attr
    def username(cls) -> Mapped[str]:
        return mapped_column(String(128), nullable=False)

    @declared_attr
    def password_hash(cls) -> Mapped[str]:
        return mapped_column(String, nullable=False)


class CredentialModel(CuidMixin, TimestampMixin, CredentialMixin):
    """Combined mixin: CUID + timestamps + username/password_hash."""

    __abstract__ = True
