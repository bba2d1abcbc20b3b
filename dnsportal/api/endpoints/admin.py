"""Admin API: admin login and user provisioning.

Admin accounts themselves are created out of band (scripts.create_admin).
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from dnsportal.api.dependencies import (
    get_auth_service,
    get_current_admin,
    get_user_listing_service,
    get_user_provisioning_service,
)
from dnsportal.application.services.auth_service import AuthService
from dnsportal.application.services.user_provisioning_service import (
    UserProvisioningService,
)
from dnsportal.domain.entities.principal import AdminPrincipal
from dnsportal.schemas.auth import AdminLoginResponse, LoginRequest
from dnsportal.schemas.user import UserCreateRequest, UserListItem, UserResponse

router = APIRouter()


@router.post("/login", response_model=AdminLoginResponse)
async def admin_login(
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AdminLoginResponse:
    """Authenticate an admin; return a 7-day admin token."""
    token = await auth_service.login_admin(body.username, body.password)
    return AdminLoginResponse(token=token)


@router.post("/users", response_model=UserResponse)
async def create_user(
    body: UserCreateRequest,
    admin: Annotated[AdminPrincipal, Depends(get_current_admin)],
    service: Annotated[UserProvisioningService, Depends(get_user_provisioning_service)],
) -> UserResponse:
    """Create an active user bound to endpointId. 400 if username or endpointId is taken."""
    user = await service.create_user(body.username, body.password, body.endpoint_id)
    return UserResponse(
        id=user.id,
        username=user.username,
        endpoint_id=user.endpoint_id,
        is_active=user.is_active,
    )


@router.get("/users", response_model=list[UserListItem])
async def list_users(
    admin: Annotated[AdminPrincipal, Depends(get_current_admin)],
    service: Annotated[UserProvisioningService, Depends(get_user_listing_service)],
) -> list[UserListItem]:
    """List all users (no password hashes), newest first."""
    users = await service.list_users()
    return [
        UserListItem(
            id=u.id,
            username=u.username,
            endpoint_id=u.endpoint_id,
            is_active=u.is_active,
            created_at=u.created_at,
        )
        for u in users
    ]
