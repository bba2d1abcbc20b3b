"""Upstream DNS-filtering profile API."""

from dnsportal.infrastructure.external.profiles.client import (
    ProfileApiClient,
    build_profile_client,
)

__all__ = ["ProfileApiClient", "build_profile_client"]
