"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for domain validation."""

    # Identity errors
    INVALID_IDENTITY = "INVALID_IDENTITY"

    # Content errors
    EMPTY_OR_UNSAFE = "EMPTY_OR_UNSAFE"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_EMAIL = "INVALID_EMAIL"

    # Range errors
    WRONG_LENGTH = "WRONG_LENGTH"
    TOO_LONG = "TOO_LONG"

    # Server errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


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


class DomainValidationError(AppException):
    """A field value was rejected by its validator."""

    def __init__(self, field: str, message: str, error_code: ErrorCode) -> None:
        self.field = field
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
            details={"field": field},
        )


class InvalidIdentityError(DomainValidationError):
    """Value cannot be parsed as the required identity type."""

    def __init__(self, field: str, message: str = "identity is not valid") -> None:
        super().__init__(field, message, ErrorCode.INVALID_IDENTITY)


class EmptyOrUnsafeError(DomainValidationError):
    """Required string is empty, or became empty after sanitizing."""

    def __init__(self, field: str, message: str = "value is empty or insecure") -> None:
        super().__init__(field, message, ErrorCode.EMPTY_OR_UNSAFE)


class InvalidFormatError(DomainValidationError):
    """String is not made of hexadecimal digits only."""

    def __init__(self, field: str, message: str = "value is not hexadecimal") -> None:
        super().__init__(field, message, ErrorCode.INVALID_FORMAT)


class InvalidEmailError(DomainValidationError):
    """String fails email syntax validation."""

    def __init__(self, field: str, message: str = "email is empty or insecure") -> None:
        super().__init__(field, message, ErrorCode.INVALID_EMAIL)


class OutOfRangeError(DomainValidationError):
    """Value falls outside the range the field accepts.

    Raised directly for activation tokens, whose format failures are reported
    as range violations with ``ErrorCode.INVALID_FORMAT``.
    """

    def __init__(
        self,
        field: str,
        message: str = "value is out of range",
        error_code: ErrorCode = ErrorCode.WRONG_LENGTH,
    ) -> None:
        super().__init__(field, message, error_code)


class WrongLengthError(OutOfRangeError):
    """String length differs from the exact length required."""

    def __init__(self, field: str, expected: int) -> None:
        super().__init__(
            field,
            message=f"{field} must be exactly {expected} characters",
            error_code=ErrorCode.WRONG_LENGTH,
        )
        self.details = {"field": field, "expected_length": expected}


class TooLongError(OutOfRangeError):
    """String length exceeds the maximum allowed."""

    def __init__(self, field: str, max_length: int) -> None:
        super().__init__(
            field,
            message=f"{field} is too large",
            error_code=ErrorCode.TOO_LONG,
        )
        self.details = {"field": field, "max_length": max_length}
