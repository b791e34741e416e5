"""Author reference domain entity."""

import structlog

from core.exceptions import DomainValidationError
from domain.validators import parse_int

logger = structlog.get_logger()


class AuthorRef:
    """Lightweight reference to an author.

    Only ``author_id`` is validated. Email, hash and username are loaded from
    a trusted source and exposed read-only.
    """

    def __init__(
        self,
        author_id: int | str,
        author_email: str | None = None,
        author_hash: str | None = None,
        author_username: str | None = None,
    ) -> None:
        try:
            self.author_id = author_id
        except DomainValidationError as exc:
            logger.warning("author_rejected", field=exc.field, error_code=exc.error_code.value)
            raise
        self._author_email = author_email
        self._author_hash = author_hash
        self._author_username = author_username

    @property
    def author_id(self) -> int:
        return self._author_id

    @author_id.setter
    def author_id(self, value: int | str) -> None:
        self._author_id = parse_int(value, "author_id")

    @property
    def author_email(self) -> str | None:
        return self._author_email

    @property
    def author_hash(self) -> str | None:
        return self._author_hash

    @property
    def author_username(self) -> str | None:
        return self._author_username

    def __repr__(self) -> str:
        return f"AuthorRef(author_id={self._author_id!r}, author_username={self._author_username!r})"
