"""Application services (use cases)."""

from dnsportal.application.services.access_guard import AccessGuard
from dnsportal.application.services.auth_service import AuthService
from dnsportal.application.services.profile_service import ProfileService
from dnsportal.application.services.user_provisioning_service import (
    UserProvisioningService,
)

__all__ = [
    "AccessGuard",
    "AuthService",
    "ProfileService",
    "UserProvisioningService",
]
