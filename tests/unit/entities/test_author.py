"""Unit tests for the AuthorRef entity."""

from typing import Any

import pytest

from core.exceptions import ErrorCode, InvalidIdentityError
from domain.entities.author import AuthorRef


class TestAuthorId:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(7, 7), ("42", 42), (" 42 ", 42), ("-3", -3), ("+5", 5), ("0", 0), (9.0, 9)],
    )
    def test_accepts_integer_values(self, value: Any, expected: int):
        author = AuthorRef(value)

        assert author.author_id == expected
        assert type(author.author_id) is int

    @pytest.mark.parametrize("value", ["", "abc", "4.2", "007", "1e3", 4.5, True, None, [1]])
    def test_rejects_non_integers(self, value: Any):
        with pytest.raises(InvalidIdentityError) as exc_info:
            AuthorRef(value)

        assert exc_info.value.error_code == ErrorCode.INVALID_IDENTITY
        assert exc_info.value.field == "author_id"

    def test_failed_update_keeps_previous_id(self):
        author = AuthorRef(1)

        with pytest.raises(InvalidIdentityError):
            author.author_id = "one"

        assert author.author_id == 1


class TestReadOnlyFields:
    def test_returns_loaded_values_unchanged(self):
        author = AuthorRef(
            1,
            author_email=" Writer@Example.com ",
            author_hash="ABC",
            author_username="writer",
        )

        assert author.author_email == " Writer@Example.com "
        assert author.author_hash == "ABC"
        assert author.author_username == "writer"

    def test_defaults_to_none(self):
        author = AuthorRef(1)

        assert author.author_email is None
        assert author.author_hash is None
        assert author.author_username is None

    def test_fields_cannot_be_assigned(self):
        author = AuthorRef(1, author_username="writer")

        with pytest.raises(AttributeError):
            author.author_username = "someone-else"  # type: ignore[misc]

    def test_repr_omits_hash(self):
        author = AuthorRef(1, author_hash="deadbeef", author_username="writer")

        assert "deadbeef" not in repr(author)
