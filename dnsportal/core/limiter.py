"""Rate limiter instance for SlowAPI.

Shared so main (app.state.limiter + SlowAPIMiddleware) and tests use the same
instance. The application limit is one bucket shared by every API route: at most 100
requests per client IP in any 15-minute moving window.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

# Single source of truth for rate limit strings.
API_LIMIT = "100/15 minutes"
RATE_LIMIT_MESSAGE = "Too many requests from this IP"

limiter = Limiter(
    key_func=get_remote_address,
    application_limits=[API_LIMIT],
    strategy="moving-window",
)
