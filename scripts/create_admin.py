"""Create an admin account. Admins cannot be created over HTTP.

Usage:
    python -m scripts.create_admin <username> [password]
If password is omitted, a random one is printed.
"""

import asyncio
import secrets
import sys

from dnsportal.core.config import get_settings
from dnsportal.domain.exceptions import AdminAlreadyExistsException
from dnsportal.infrastructure.persistence.database import get_session_factory
from dnsportal.infrastructure.persistence.repositories import AdminRepository


async def main() -> None:
    """Create admin; exits 1 when the username is taken."""
    if len(sys.argv) < 2:
        print(
            "Usage: python -m scripts.create_admin <username> [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    username = sys.argv[1]
    password = sys.argv[2] if len(sys.argv) > 2 else secrets.token_urlsafe(16)

    get_settings()
    async with get_session_factory()() as session:
        async with session.begin():
            try:
                admin = await AdminRepository(session).create_admin(username, password)
            except AdminAlreadyExistsException as e:
                print(e.message, file=sys.stderr)
                sys.exit(1)
    print(f"Created admin: {admin.id} ({admin.username})")
    if len(sys.argv) <= 2:
        print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())
