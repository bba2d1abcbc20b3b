"""HTTP API (mounted under /api)."""

from dnsportal.api.router import api_router

__all__ = ["api_router"]
