"""Custom exceptions and error codes."""

from enum import IntEnum, StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Validation errors (400)
    INVALID_INPUT = "INVALID_INPUT"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Authorization errors (403)
    UNAUTHORIZED = "UNAUTHORIZED"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Conflict errors (409)
    PROFILE_ALREADY_EXISTS = "PROFILE_ALREADY_EXISTS"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ProfileErrorCode(IntEnum):
    """Numeric result codes returned by the profile state machine."""

    INVALID_INPUT = 400
    UNAUTHORIZED = 403
    NOT_FOUND = 404
    ALREADY_EXISTS = 409


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.AUTHENTICATION_REQUIRED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class InvalidProfileInputError(AppException):
    """Profile input failed validation."""

    def __init__(self, message: str = "Invalid profile input") -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_INPUT,
            message=message,
            status_code=400,
        )


class ProfileAccessDeniedError(AppException):
    """A private profile was requested by someone other than its owner."""

    def __init__(self, owner_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.UNAUTHORIZED,
            message="This profile is private",
            status_code=403,
            details={"owner_id": owner_id},
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, owner_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {owner_id}",
            status_code=404,
            details={"owner_id": owner_id},
        )


class ProfileAlreadyExistsError(AppException):
    """The caller already owns a profile."""

    def __init__(self, owner_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_ALREADY_EXISTS,
            message="A profile already exists for this user",
            status_code=409,
            details={"owner_id": owner_id},
        )


def exception_for(code: ProfileErrorCode, owner_id: str) -> AppException:
    """Map a state-machine error code to the exception the API raises."""
    if code is ProfileErrorCode.INVALID_INPUT:
        return InvalidProfileInputError()
    if code is ProfileErrorCode.UNAUTHORIZED:
        return ProfileAccessDeniedError(owner_id)
    if code is ProfileErrorCode.NOT_FOUND:
        return ProfileNotFoundError(owner_id)
    return ProfileAlreadyExistsError(owner_id)
