"""User provisioning schemas."""

from datetime import datetime

from pydantic import Field

from dnsportal.schemas.base import CamelModel


class UserCreateRequest(CamelModel):
    """Request body for POST /admin/users."""

    username: str = Field(..., min_length=1, max_length=128)
    password: str = Field(..., min_length=1)
    endpoint_id: str = Field(..., min_length=1, max_length=128)


class UserResponse(CamelModel):
    """User response (no password hash)."""

    id: str
    username: str
    endpoint_id: str
    is_active: bool


class UserListItem(UserResponse):
    """User row in GET /admin/users."""

    created_at: datetime | None = None
