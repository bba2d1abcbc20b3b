"""Service interfaces (ports): upstream profile gateway and token issuer."""

from __future__ import annotations

from typing import Any, Protocol


class IProfileGateway(Protocol):
    """External profile API keyed by an opaque endpoint id."""

    async def fetch_profile(self, endpoint_id: str) -> Any:
        """Return profile data. Raises UpstreamException on provider failure."""

    async def update_profile(
        self, endpoint_id: str, patch: dict[str, Any]
    ) -> Any:
        """Apply patch and return profile data. Raises UpstreamException on failure."""


class ITokenIssuer(Protocol):
    """Issues and verifies session tokens for both principal kinds."""

    def issue_user_token(self, user_id: str, username: str) -> str: ...

    def issue_admin_token(self, admin_id: str) -> str: ...

    def verify(self, token: str) -> dict[str, Any]: ...
