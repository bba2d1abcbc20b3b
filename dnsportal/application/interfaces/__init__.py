"""Ports implemented by infrastructure (repositories, upstream gateway, token issuer)."""

from dnsportal.application.interfaces.repositories import (
    IAdminRepository,
    IUserRepository,
)
from dnsportal.application.interfaces.services import IProfileGateway, ITokenIssuer

__all__ = [
    "IAdminRepository",
    "IProfileGateway",
    "ITokenIssuer",
    "IUserRepository",
]
