"""Activate or deactivate a user. Takes effect on the user's next request.

Usage:
    python -m scripts.set_user_active <username> <true|false>
"""

import asyncio
import sys

from dnsportal.core.config import get_settings
from dnsportal.infrastructure.persistence.database import get_session_factory
from dnsportal.infrastructure.persistence.repositories import UserRepository

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


async def main() -> None:
    """Set is_active for username."""
    if len(sys.argv) < 3 or sys.argv[2].lower() not in _TRUE | _FALSE:
        print(
            "Usage: python -m scripts.set_user_active <username> <true|false>",
            file=sys.stderr,
        )
        sys.exit(1)
    username = sys.argv[1]
    is_active = sys.argv[2].lower() in _TRUE

    get_settings()
    async with get_session_factory()() as session:
        async with session.begin():
            user = await UserRepository(session).set_active(username, is_active)
            if not user:
                print(f"User not found: {username}", file=sys.stderr)
                sys.exit(1)
    state = "active" if user.is_active else "inactive"
    print(f"User {user.id} ({user.username}) is now {state}")


if __name__ == "__main__":
    asyncio.run(main())
