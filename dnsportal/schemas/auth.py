"""Auth API schemas."""

from pydantic import BaseModel

from dnsportal.schemas.base import CamelModel


class LoginRequest(BaseModel):
    """Request body for user and admin login.

    Fields are optional here so that a missing field produces the login
    error message rather than a generic validation error.
    """

    username: str | None = None
    password: str | None = None


class LoginUser(CamelModel):
    """User summary returned with a user login token."""

    id: str
    username: str
    endpoint_id: str


class UserLoginResponse(BaseModel):
    """Response for POST /auth/login."""

    token: str
    user: LoginUser


class AdminLoginResponse(BaseModel):
    """Response for POST /admin/login."""

    token: str
