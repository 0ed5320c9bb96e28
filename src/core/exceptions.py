"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Error codes used to classify failures in logs."""

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    USERNAME_TOO_SHORT = "USERNAME_TOO_SHORT"
    UNVERIFIABLE_PROFILE = "UNVERIFIABLE_PROFILE"

    # Conflict errors (400)
    USERNAME_TAKEN = "USERNAME_TAKEN"
    DUPLICATE_KEY = "DUPLICATE_KEY"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


USERNAME_TOO_SHORT_MESSAGE = "Username must be at least 3 characters long."
ONLY_COMPANIES_VERIFIED_MESSAGE = "Only companies can be verified."


class AppException(Exception):
    """Base application exception.

    ``details`` is sent to the caller as the ``error`` field of the
    response body when present.
    """

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


class ValidationError(AppException):
    """Input fails a profile constraint."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
        )


class UsernameTooShortError(ValidationError):
    """Username is shorter than the minimum length after trimming."""

    def __init__(self) -> None:
        super().__init__(USERNAME_TOO_SHORT_MESSAGE, ErrorCode.USERNAME_TOO_SHORT)


class UnverifiableProfileError(ValidationError):
    """A non-company profile was marked as verified."""

    def __init__(self) -> None:
        super().__init__(ONLY_COMPANIES_VERIFIED_MESSAGE, ErrorCode.UNVERIFIABLE_PROFILE)


class ConflictError(AppException):
    """Username uniqueness violation."""

    def __init__(
        self,
        message: str = "Username is already taken.",
        error_code: ErrorCode = ErrorCode.USERNAME_TAKEN,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
        )


class NotFoundError(AppException):
    """No profile matches the requested key."""

    def __init__(self, profile_key: str = "") -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message="Profile not found",
            status_code=404,
        )
        self.profile_key = profile_key


class InternalError(AppException):
    """Unexpected store or connectivity failure."""

    def __init__(self, message: str, error: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=message,
            status_code=500,
            details=error,
        )
