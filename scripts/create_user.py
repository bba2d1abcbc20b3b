"""Create a user bound to an endpoint id (same rules as POST /api/admin/users).

Usage:
    python -m scripts.create_user <username> <endpoint_id> [password]
If password is omitted, a random one is printed.
"""

import asyncio
import secrets
import sys

from dnsportal.application.services.user_provisioning_service import (
    UserProvisioningService,
)
from dnsportal.core.config import get_settings
from dnsportal.domain.exceptions import UserAlreadyExistsException
from dnsportal.infrastructure.persistence.database import get_session_factory
from dnsportal.infrastructure.persistence.repositories import UserRepository


async def main() -> None:
    """Create user; exits 1 when username or endpoint id is taken."""
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.create_user <username> <endpoint_id> [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    username = sys.argv[1]
    endpoint_id = sys.argv[2]
    password = sys.argv[3] if len(sys.argv) > 3 else secrets.token_urlsafe(12)

    get_settings()
    async with get_session_factory()() as session:
        async with session.begin():
            service = UserProvisioningService(UserRepository(session))
            try:
                user = await service.create_user(username, password, endpoint_id)
            except UserAlreadyExistsException as e:
                print(e.message, file=sys.stderr)
                sys.exit(1)
    print(f"Created user: {user.id} ({user.username}) -> endpoint {user.endpoint_id}")
    if len(sys.argv) <= 3:
        print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())
