"""DTOs for user and admin use cases (no dependency on ORM). Never carry a password hash."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """User read-model: the safe projection of a stored user."""

    id: str
    username: str
    endpoint_id: str
    is_active: bool
    created_at: datetime | None = None


@dataclass(frozen=True)
class AdminResult:
    """Admin read-model."""

    id: str
    username: str


@dataclass(frozen=True)
class UserLogin:
    """Successful user login: session token plus the user it was issued for."""

    token: str
    user: UserResult
