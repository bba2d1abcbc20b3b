"""User ORM model (end user bound to one upstream profile)."""

from sqlalchemy import Boolean, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from dnsportal.infrastructure.persistence.database import Base
from dnsportal.infrastructure.persistence.models.mixins import CredentialModel


class User(CredentialModel, Base):
    """User model. Table: app_user. Unique username and unique endpoint_id.

    endpoint_id is set at creation and never updated.
    """

    __tablename__ = "app_user"

    endpoint_id: Mapped[str] = mapped_column(String(128), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )

    __table_args__ = (
        UniqueConstraint("username", name="uq_app_user_username"),
        UniqueConstraint("endpoint_id", name="uq_app_user_endpoint_id"),
    )
