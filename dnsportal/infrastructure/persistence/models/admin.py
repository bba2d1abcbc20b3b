"""Admin ORM model. Admins are provisioned out of band and have no endpoint."""

from sqlalchemy import UniqueConstraint

from dnsportal.infrastructure.persistence.database import Base
from dnsportal.infrastructure.persistence.models.mixins import CredentialModel


class Admin(CredentialModel, Base):
    """Admin model. Table: admin_user. Unique username."""

    __tablename__ = "admin_user"

    __table_args__ = (UniqueConstraint("username", name="uq_admin_user_username"),)
