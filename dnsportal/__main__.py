"""Run the API server: python -m dnsportal (listens on HOST:PORT)."""

import uvicorn

from dnsportal.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "dnsportal.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
