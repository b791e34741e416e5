"""Field validators shared by domain entities.

Each validator normalizes its input, checks it and returns the value to store.
Failures raise a ``DomainValidationError`` subclass tagged with the field name;
validators never touch entity state.
"""

import re
from typing import Any
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

from core.exceptions import (
    EmptyOrUnsafeError,
    ErrorCode,
    InvalidEmailError,
    InvalidFormatError,
    InvalidIdentityError,
    OutOfRangeError,
    TooLongError,
    WrongLengthError,
)
from domain.sanitize import Sanitizer

_HEX_DIGITS = frozenset("0123456789abcdef")
_INT_RE = re.compile(r"[+-]?(0|[1-9][0-9]*)")


def _is_hex(value: str) -> bool:
    return bool(value) and all(char in _HEX_DIGITS for char in value)


def parse_uuid(value: Any, field: str) -> UUID:
    """Parse a UUID value, UUID string or 16 raw bytes."""
    if isinstance(value, UUID):
        return value
    if isinstance(value, bytes) and len(value) == 16:
        return UUID(bytes=value)
    if isinstance(value, str):
        try:
            return UUID(value.strip())
        except ValueError as exc:
            raise InvalidIdentityError(field, f"{field} is not a valid UUID") from exc
    raise InvalidIdentityError(field, f"{field} is not a valid UUID")


def parse_int(value: Any, field: str) -> int:
    """Parse an integer the way an integer input filter would.

    Accepts ints, integral floats and decimal strings without leading zeros.
    Booleans are rejected even though they subclass ``int``.
    """
    if isinstance(value, bool):
        raise InvalidIdentityError(field, f"{field} is not a valid integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        candidate = value.strip()
        if _INT_RE.fullmatch(candidate):
            return int(candidate)
    raise InvalidIdentityError(field, f"{field} is not a valid integer")


def normalize_hex_token(
    value: Any,
    field: str,
    length: int,
    *,
    range_errors: bool = False,
) -> str:
    """Trim and lowercase a fixed-length hex string.

    With ``range_errors`` every failure is an ``OutOfRangeError``: an empty or
    non-hex value is tagged ``INVALID_FORMAT`` instead of raising
    ``EmptyOrUnsafeError`` / ``InvalidFormatError``.
    """
    if not isinstance(value, str):
        if range_errors:
            raise OutOfRangeError(field, f"{field} is not valid", ErrorCode.INVALID_FORMAT)
        raise EmptyOrUnsafeError(field, f"{field} is empty or insecure")

    value = value.strip().lower()
    if not value and not range_errors:
        raise EmptyOrUnsafeError(field, f"{field} is empty or insecure")
    if not _is_hex(value):
        if range_errors:
            raise OutOfRangeError(field, f"{field} is not valid", ErrorCode.INVALID_FORMAT)
        raise InvalidFormatError(field, f"{field} is not hexadecimal")
    if len(value) != length:
        raise WrongLengthError(field, length)
    return value


def normalize_safe_string(
    value: Any,
    field: str,
    max_length: int,
    sanitizer: Sanitizer,
) -> str:
    """Trim and sanitize a free-text value, then bound its length."""
    if not isinstance(value, str):
        raise EmptyOrUnsafeError(field, f"{field} is empty or insecure")

    value = sanitizer(value.strip())
    if not value:
        raise EmptyOrUnsafeError(field, f"{field} is empty or insecure")
    if len(value) > max_length:
        raise TooLongError(field, max_length)
    return value


def normalize_email(value: Any, field: str, max_length: int) -> str:
    """Trim an email address and check its syntax (no DNS lookups)."""
    if not isinstance(value, str):
        raise InvalidEmailError(field, f"{field} is empty or insecure")

    value = value.strip()
    if not value:
        raise InvalidEmailError(field, f"{field} is empty or insecure")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise InvalidEmailError(field, f"{field} is empty or insecure") from exc
    if len(value) > max_length:
        raise TooLongError(field, max_length)
    return value
