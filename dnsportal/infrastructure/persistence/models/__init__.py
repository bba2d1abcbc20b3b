"""ORM models. Importing this package registers every table on Base.metadata."""

from dnsportal.infrastructure.persistence.models.admin import Admin
from dnsportal.infrastructure.persistence.models.user import User

__all__ = ["Admin", "User"]
