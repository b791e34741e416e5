"""Profile domain entity."""

from typing import Any
from uuid import UUID

import structlog

from core.exceptions import DomainValidationError
from domain.sanitize import Sanitizer, sanitize_string
from domain.validators import (
    normalize_email,
    normalize_hex_token,
    normalize_safe_string,
    parse_uuid,
)

logger = structlog.get_logger()

ACTIVATION_TOKEN_LENGTH = 32
AT_HANDLE_MAX_LENGTH = 32
EMAIL_MAX_LENGTH = 128
HASH_LENGTH = 128
PHONE_MAX_LENGTH = 32
SALT_LENGTH = 64


class ValidatedProfile:
    """Domain entity for a user profile.

    Every field is a property whose setter normalizes and validates the value
    before storing it. A rejected value raises a ``DomainValidationError`` and
    leaves the field as it was, so an instance is always fully valid.
    """

    def __init__(
        self,
        profile_id: UUID | str | bytes,
        profile_activation_token: str | None,
        profile_at_handle: str,
        profile_email: str,
        profile_hash: str,
        profile_phone: str | None,
        profile_salt: str,
        *,
        sanitizer: Sanitizer = sanitize_string,
    ) -> None:
        self._sanitizer = sanitizer
        try:
            self.profile_id = profile_id
            self.profile_activation_token = profile_activation_token
            self.profile_at_handle = profile_at_handle
            self.profile_email = profile_email
            self.profile_hash = profile_hash
            self.profile_phone = profile_phone
            self.profile_salt = profile_salt
        except DomainValidationError as exc:
            logger.warning(
                "profile_rejected",
                field=exc.field,
                error_code=exc.error_code.value,
            )
            raise

    @property
    def profile_id(self) -> UUID:
        return self._profile_id

    @profile_id.setter
    def profile_id(self, value: UUID | str | bytes) -> None:
        self._profile_id = parse_uuid(value, "profile_id")

    @property
    def profile_activation_token(self) -> str | None:
        return self._profile_activation_token

    @profile_activation_token.setter
    def profile_activation_token(self, value: str | None) -> None:
        if value is None:
            self._profile_activation_token = None
            return
        self._profile_activation_token = normalize_hex_token(
            value,
            "profile_activation_token",
            ACTIVATION_TOKEN_LENGTH,
            range_errors=True,
        )

    @property
    def profile_at_handle(self) -> str:
        return self._profile_at_handle

    @profile_at_handle.setter
    def profile_at_handle(self, value: str) -> None:
        self._profile_at_handle = normalize_safe_string(
            value, "profile_at_handle", AT_HANDLE_MAX_LENGTH, self._sanitizer
        )

    @property
    def profile_email(self) -> str:
        return self._profile_email

    @profile_email.setter
    def profile_email(self, value: str) -> None:
        self._profile_email = normalize_email(value, "profile_email", EMAIL_MAX_LENGTH)

    @property
    def profile_hash(self) -> str:
        """Hex digest of the password hash (128 lowercase hex characters)."""
        return self._profile_hash

    @profile_hash.setter
    def profile_hash(self, value: str) -> None:
        self._profile_hash = normalize_hex_token(value, "profile_hash", HASH_LENGTH)

    @property
    def profile_phone(self) -> str | None:
        return self._profile_phone

    @profile_phone.setter
    def profile_phone(self, value: str | None) -> None:
        if value is None:
            self._profile_phone = None
            return
        self._profile_phone = normalize_safe_string(
            value, "profile_phone", PHONE_MAX_LENGTH, self._sanitizer
        )

    @property
    def profile_salt(self) -> str:
        """Hex encoded password salt (64 lowercase hex characters)."""
        return self._profile_salt

    @profile_salt.setter
    def profile_salt(self, value: str) -> None:
        self._profile_salt = normalize_hex_token(value, "profile_salt", SALT_LENGTH)

    def serialize(self) -> dict[str, str | None]:
        """Format the profile for transport.

        The password hash and salt are never included.
        """
        return {
            "profileId": str(self._profile_id),
            "profileActivationToken": self._profile_activation_token,
            "profileAtHandle": self._profile_at_handle,
            "profileEmail": self._profile_email,
            "profilePhone": self._profile_phone,
        }

    def __eq__(self, other: Any) -> bool:
        """Compare profiles by identity."""
        if not isinstance(other, ValidatedProfile):
            return NotImplemented
        return self._profile_id == other._profile_id

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ValidatedProfile(profile_id={str(self._profile_id)!r}, "
            f"profile_at_handle={self._profile_at_handle!r}, "
            f"profile_email={self._profile_email!r})"
        )
