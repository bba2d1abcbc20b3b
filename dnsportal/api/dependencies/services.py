"""Service dependencies: provisioning and the tenant profile gateway."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from dnsportal.api.dependencies.db import get_user_repo, get_user_repo_for_write
from dnsportal.application.interfaces.repositories import IUserRepository
from dnsportal.application.interfaces.services import IProfileGateway
from dnsportal.application.services.profile_service import ProfileService
from dnsportal.application.services.user_provisioning_service import (
    UserProvisioningService,
)


def get_profile_gateway(request: Request) -> IProfileGateway:
    """Profile API client built in the lifespan (composition root)."""
    return request.app.state.profile_client


def get_profile_service(
    gateway: Annotated[IProfileGateway, Depends(get_profile_gateway)],
) -> ProfileService:
    return ProfileService(gateway)


def get_user_provisioning_service(
    user_repo: Annotated[IUserRepository, Depends(get_user_repo_for_write)],
) -> UserProvisioningService:
    return UserProvisioningService(user_repo)


def get_user_listing_service(
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> UserProvisioningService:
    """Provisioning service over a read session (no commit), for listing."""
    return UserProvisioningService(user_repo)
