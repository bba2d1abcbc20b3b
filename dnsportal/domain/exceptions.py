"""Domain exceptions for the portal.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PortalException(Exception):
    """Base exception for all portal application errors.

    Attributes:
        message: Human-readable error description (returned to the client).
        error_code: Machine-readable error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Client-facing error body."""
        body: dict[str, Any] = {"error": self.message, "code": self.error_code}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(PortalException):
    """Raised when input is missing or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(PortalException):
    """Raised when credentials or a bearer token are missing or wrong (401)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(PortalException):
    """Raised when an authenticated request is not allowed (403).

    Covers unknown or inactive principals and principals without a tenant
    resource.
    """

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message, "AUTHORIZATION_ERROR")


class InvalidTokenException(PortalException):
    """Raised when a session token fails verification (signature, expiry, shape)."""

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message, "INVALID_TOKEN")


class UserAlreadyExistsException(PortalException):
    """Raised when a username or endpoint ID is already bound to a user."""

    def __init__(self) -> None:
        super().__init__(
            "Username or endpoint ID already exists",
            "USER_ALREADY_EXISTS",
        )


class AdminAlreadyExistsException(PortalException):
    """Raised when provisioning an admin whose username is taken."""

    def __init__(self, username: str) -> None:
        super().__init__(
            f"Admin '{username}' already exists",
            "ADMIN_ALREADY_EXISTS",
            {"username": username},
        )


class UpstreamException(PortalException):
    """Raised when the external profile API fails.

    The message is the provider's own message when it sent one, otherwise a
    generic description of the failed operation.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, "UPSTREAM_ERROR")
        self.status_code = status_code
