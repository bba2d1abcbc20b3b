"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, the profile API client
(constructed here and injected into routes via app.state), DB engine dispose.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from dnsportal.core.config import get_settings
from dnsportal.infrastructure.external.profiles import build_profile_client
from dnsportal.infrastructure.persistence.database import dispose_engine
from dnsportal.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if getattr(app.state, "profile_client", None) is None:
        app.state.profile_client = build_profile_client(settings)
    logger.info("Profile API client ready (%s)", settings.controld_api_base_url)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "profile_client", None) is not None:
        await app.state.profile_client.aclose()
        app.state.profile_client = None
        logger.info("Profile API client closed")

    await dispose_engine()
