"""Tenant profile access: the authenticated user's own upstream profile only."""

from __future__ import annotations

from typing import Any

from dnsportal.application.interfaces.services import IProfileGateway
from dnsportal.domain.entities.principal import Principal
from dnsportal.domain.exceptions import AuthorizationException


class ProfileService:
    """Read and patch the profile bound to the principal's endpoint id.

    The endpoint id comes from the principal resolved by the access guard and
    nowhere else; callers cannot pass one in.
    """

    def __init__(self, gateway: IProfileGateway) -> None:
        self._gateway = gateway

    @staticmethod
    def _endpoint_of(principal: Principal) -> str:
        if not principal.is_tenant:
            raise AuthorizationException("No profile is bound to this account")
        return principal.endpoint_id

    async def get_profile(self, principal: Principal) -> Any:
        return await self._gateway.fetch_profile(self._endpoint_of(principal))

    async def update_profile(
        self, principal: Principal, patch: dict[str, Any]
    ) -> Any:
        return await self._gateway.update_profile(self._endpoint_of(principal), patch)
