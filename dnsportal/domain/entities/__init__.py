"""Domain entities."""

from dnsportal.domain.entities.principal import (
    NO_TENANT,
    AdminPrincipal,
    Principal,
    PrincipalKind,
    UserPrincipal,
)

__all__ = [
    "NO_TENANT",
    "AdminPrincipal",
    "Principal",
    "PrincipalKind",
    "UserPrincipal",
]
