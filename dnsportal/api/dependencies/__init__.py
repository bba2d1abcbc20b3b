"""Dependency providers (composition root). Routes never construct repositories or clients themselves."""

from dnsportal.api.dependencies.auth import (
    AuthSecurity,
    get_access_guard,
    get_auth_security,
    get_auth_service,
    get_current_admin,
    get_current_user,
)
from dnsportal.api.dependencies.db import (
    get_admin_repo,
    get_user_repo,
    get_user_repo_for_write,
)
from dnsportal.api.dependencies.services import (
    get_profile_gateway,
    get_profile_service,
    get_user_listing_service,
    get_user_provisioning_service,
)

__all__ = [
    "AuthSecurity",
    "get_access_guard",
    "get_admin_repo",
    "get_auth_security",
    "get_auth_service",
    "get_current_admin",
    "get_current_user",
    "get_profile_gateway",
    "get_profile_service",
    "get_user_listing_service",
    "get_user_provisioning_service",
    "get_user_repo",
    "get_user_repo_for_write",
]
