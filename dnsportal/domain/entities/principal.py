"""Authenticated principals attached to a request after token verification.

Two kinds share one token scheme: end users (bound to exactly one upstream
profile via endpoint_id) and administrators (no tenant binding).
"""

from dataclasses import dataclass
from enum import Enum

# Claim fields identifying the subject of a session token, one per kind.
USER_ID_CLAIM = "userId"
USERNAME_CLAIM = "username"
ADMIN_ID_CLAIM = "adminId"

# Admins carry this in place of an endpoint id: "no tenant resource".
NO_TENANT = ""


class PrincipalKind(str, Enum):
    """Kind of authenticated subject; selects the claim shape a token must carry."""

    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class UserPrincipal:
    """End user bound to one upstream profile."""

    id: str
    username: str
    endpoint_id: str

    kind: PrincipalKind = PrincipalKind.USER

    @property
    def is_tenant(self) -> bool:
        return self.endpoint_id != NO_TENANT


@dataclass(frozen=True)
class AdminPrincipal:
    """Administrator; never bound to an upstream profile."""

    id: str
    username: str
    endpoint_id: str = NO_TENANT

    kind: PrincipalKind = PrincipalKind.ADMIN

    @property
    def is_tenant(self) -> bool:
        return False


Principal = UserPrincipal | AdminPrincipal
