"""Client for the provider's profile API (``/profiles/{endpoint_id}``).

Profile data is opaque: it is passed through exactly as the provider returns
it (the ``body`` member of a successful response). Every call has an explicit
timeout. Reads are retried on transport errors and 5xx responses with a short
exponential backoff; writes are sent once.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from dnsportal.core.config import Settings
from dnsportal.domain.exceptions import UpstreamException
from dnsportal.shared.logging import get_logger

logger = get_logger(__name__)

FETCH_FAILED = "Failed to fetch profile"
UPDATE_FAILED = "Failed to update profile"


def _is_transient(exc: BaseException) -> bool:
    """Transport failures and 5xx responses are worth another read attempt."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    return isinstance(exc, httpx.TransportError)


def _provider_message(response: httpx.Response) -> str | None:
    """Return the provider's error message from an error body, if any."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    message = data.get("message")
    if not message and isinstance(data.get("error"), dict):
        message = data["error"].get("message")
    return message if isinstance(message, str) and message else None


def _to_upstream_error(exc: httpx.HTTPError, fallback: str) -> UpstreamException:
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        message = _provider_message(exc.response) or fallback
        logger.warning("Profile API returned %s: %s", status, message)
        return UpstreamException(message, status_code=status)
    logger.warning("Profile API request failed: %s", type(exc).__name__)
    return UpstreamException(fallback)


def _body(response: httpx.Response, fallback: str) -> Any:
    """Return the `body` member as sent, whatever its JSON type."""
    try:
        data = response.json()
    except ValueError:
        raise UpstreamException(fallback, status_code=response.status_code) from None
    if not isinstance(data, dict) or "body" not in data:
        raise UpstreamException(fallback, status_code=response.status_code)
    return data["body"]


class ProfileApiClient:
    """Profile API client over an injected httpx.AsyncClient.

    The httpx client carries base URL, API key header and timeout (see
    build_profile_client); this class owns the paths, retries and error
    mapping. Endpoint ids are path-escaped so an id can never address a
    different resource.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        read_attempts: int = 3,
        retry_wait: wait_base | None = None,
    ) -> None:
        self._client = http_client
        self._read_attempts = max(1, read_attempts)
        self._retry_wait = retry_wait or wait_exponential(multiplier=0.2, max=2)

    @staticmethod
    def _path(endpoint_id: str) -> str:
        if not endpoint_id:
            raise ValueError("endpoint_id is required for profile API calls")
        return f"/profiles/{quote(endpoint_id, safe='')}"

    async def fetch_profile(self, endpoint_id: str) -> Any:
        path = self._path(endpoint_id)
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._read_attempts),
                wait=self._retry_wait,
                retry=retry_if_exception(_is_transient),
                reraise=True,
            ):
                with attempt:
                    response = await self._client.get(path)
                    response.raise_for_status()
        except httpx.HTTPError as e:
            raise _to_upstream_error(e, FETCH_FAILED) from e
        return _body(response, FETCH_FAILED)

    async def update_profile(
        self, endpoint_id: str, patch: dict[str, Any]
    ) -> Any:
        path = self._path(endpoint_id)
        try:
            response = await self._client.put(path, json=patch)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise _to_upstream_error(e, UPDATE_FAILED) from e
        return _body(response, UPDATE_FAILED)

    async def aclose(self) -> None:
        await self._client.aclose()


def build_profile_client(settings: Settings) -> ProfileApiClient:
    """Construct the client from settings (called once in the app lifespan)."""
    http_client = httpx.AsyncClient(
        base_url=settings.controld_api_base_url,
        headers={
            "X-API-Key": settings.controld_api_key.get_secret_value(),
            "Content-Type": "application/json",
            "Accept": "application/json",
        },
        timeout=httpx.Timeout(settings.controld_api_timeout_seconds),
    )
    return ProfileApiClient(
        http_client, read_attempts=settings.controld_api_read_attempts
    )
