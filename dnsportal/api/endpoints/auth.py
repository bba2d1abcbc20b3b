"""Auth API: user login.

Uses only injected dependencies; the session token is issued by AuthService.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from dnsportal.api.dependencies import get_auth_service
from dnsportal.application.services.auth_service import AuthService
from dnsportal.schemas.auth import LoginRequest, LoginUser, UserLoginResponse

router = APIRouter()


@router.post("/login", response_model=UserLoginResponse)
async def login(
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserLoginResponse:
    """Authenticate with username and password; return a 24h token and the user."""
    result = await auth_service.login_user(body.username, body.password)
    return UserLoginResponse(
        token=result.token,
        user=LoginUser(
            id=result.user.id,
            username=result.user.username,
            endpoint_id=result.user.endpoint_id,
        ),
    )
