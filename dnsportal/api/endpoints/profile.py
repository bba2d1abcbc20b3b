"""Profile API: read and update the caller's own upstream profile.

The endpoint id is taken from the authenticated user, never from the request.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from dnsportal.api.dependencies import get_current_user, get_profile_service
from dnsportal.application.services.profile_service import ProfileService
from dnsportal.domain.entities.principal import UserPrincipal

router = APIRouter()


@router.get("")
async def get_profile(
    user: Annotated[UserPrincipal, Depends(get_current_user)],
    service: Annotated[ProfileService, Depends(get_profile_service)],
) -> Any:
    """Return the profile data bound to the current user."""
    return await service.get_profile(user)


@router.put("")
async def update_profile(
    patch: Annotated[dict[str, Any], Body()],
    user: Annotated[UserPrincipal, Depends(get_current_user)],
    service: Annotated[ProfileService, Depends(get_profile_service)],
) -> Any:
    """Send the patch to the provider for the current user's profile; return the result."""
    return await service.update_profile(user, patch)
