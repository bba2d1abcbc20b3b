"""Tests for domain exceptions (error_code, message, details, client body)."""

from dnsportal.domain.exceptions import (
    AdminAlreadyExistsException,
    AuthenticationException,
    AuthorizationException,
    InvalidTokenException,
    PortalException,
    UpstreamException,
    UserAlreadyExistsException,
    ValidationException,
)


def test_portal_exception_default_error_code() -> None:
    exc = PortalException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "PortalException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_to_dict_omits_empty_details() -> None:
    assert AuthenticationException("Invalid credentials").to_dict() == {
        "error": "Invalid credentials",
        "code": "AUTHENTICATION_ERROR",
    }


def test_validation_exception_with_field() -> None:
    exc = ValidationException("Required", field="endpointId")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.to_dict()["details"] == {"field": "endpointId"}


def test_authorization_and_token_codes() -> None:
    assert AuthorizationException().error_code == "AUTHORIZATION_ERROR"
    assert InvalidTokenException().message == "Invalid token"
    assert InvalidTokenException().error_code == "INVALID_TOKEN"


def test_user_already_exists_message() -> None:
    exc = UserAlreadyExistsException()
    assert exc.message == "Username or endpoint ID already exists"
    assert exc.error_code == "USER_ALREADY_EXISTS"


def test_admin_already_exists_keeps_username_in_details() -> None:
    exc = AdminAlreadyExistsException("root")
    assert "root" in exc.message
    assert exc.details == {"username": "root"}


def test_upstream_status_is_not_in_client_body() -> None:
    exc = UpstreamException("quota exceeded", status_code=429)
    assert exc.status_code == 429
    assert exc.to_dict() == {"error": "quota exceeded", "code": "UPSTREAM_ERROR"}
