"""Application DTOs (read models returned by repositories and services)."""

from dnsportal.application.dtos.user import AdminResult, UserLogin, UserResult

__all__ = ["AdminResult", "UserLogin", "UserResult"]
