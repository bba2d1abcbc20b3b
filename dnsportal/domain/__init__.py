"""Domain layer: principals and business exceptions (no framework imports)."""

from dnsportal.domain.exceptions import (
    AdminAlreadyExistsException,
    AuthenticationException,
    AuthorizationException,
    InvalidTokenException,
    PortalException,
    UpstreamException,
    UserAlreadyExistsException,
    ValidationException,
)

__all__ = [
    "AdminAlreadyExistsException",
    "AuthenticationException",
    "AuthorizationException",
    "InvalidTokenException",
    "PortalException",
    "UpstreamException",
    "UserAlreadyExistsException",
    "ValidationException",
]
