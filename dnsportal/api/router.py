"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from dnsportal.api.dependencies.
"""

from fastapi import APIRouter

from dnsportal.api.endpoints import admin, auth, health, profile

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
