"""Shared fixtures for unit tests."""

import hashlib
from collections.abc import Callable
from typing import Any
from uuid import UUID, uuid4

import pytest

from domain.entities.profile import ValidatedProfile


@pytest.fixture
def profile_id() -> UUID:
    """A random profile ID."""
    return uuid4()


@pytest.fixture
def activation_token() -> str:
    """A 32 character hex activation token."""
    return uuid4().hex


@pytest.fixture
def profile_hash() -> str:
    """A 128 character hex password hash."""
    return hashlib.sha512(b"correct horse battery staple").hexdigest()


@pytest.fixture
def profile_salt() -> str:
    """A 64 character hex password salt."""
    return hashlib.sha256(b"pepper").hexdigest()


@pytest.fixture
def profile_fields(
    profile_id: UUID, activation_token: str, profile_hash: str, profile_salt: str
) -> dict[str, Any]:
    """Constructor arguments for a valid profile."""
    return {
        "profile_id": profile_id,
        "profile_activation_token": activation_token,
        "profile_at_handle": "@jane",
        "profile_email": "jane@example.com",
        "profile_hash": profile_hash,
        "profile_phone": "+1 505 555 0100",
        "profile_salt": profile_salt,
    }


@pytest.fixture
def make_profile(profile_fields: dict[str, Any]) -> Callable[..., ValidatedProfile]:
    """Build a profile from valid defaults, overriding selected fields."""

    def _make(**overrides: Any) -> ValidatedProfile:
        return ValidatedProfile(**{**profile_fields, **overrides})

    return _make


@pytest.fixture
def profile(make_profile: Callable[..., ValidatedProfile]) -> ValidatedProfile:
    """A fully valid profile."""
    return make_profile()
