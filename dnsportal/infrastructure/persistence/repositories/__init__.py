"""Repositories (credential store implementations)."""

from dnsportal.infrastructure.persistence.repositories.admin_repo import AdminRepository
from dnsportal.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = ["AdminRepository", "UserRepository"]
