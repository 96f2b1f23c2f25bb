"""Article entity — a news article and its editorial status."""

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from news_agency.domain.exceptions import ArticleValidationError, InvalidStatusError


class ArticleStatus(str, Enum):
    """Editorial states an article can be in."""

    DRAFT = "draft"
    PUBLISHED = "published"
    PENDING = "pending"
    ARCHIVED = "archived"

    @classmethod
    def parse(cls, value: "ArticleStatus | str") -> "ArticleStatus":
        """Resolve a member or its exact string value, else raise InvalidStatusError."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                raise InvalidStatusError(value) from None
        raise InvalidStatusError(value)


# Assigning any of these counts as an edit and refreshes updated_at.
_MUTABLE_FIELDS = frozenset({
    "title",
    "author",
    "category",
    "content",
    "region",
    "language",
    "date",
    "status",
})


def _now() -> dt.datetime:
    return dt.datetime.now()


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(eq=False)
class Article:
    """Core domain entity representing a news article.

    A fresh ``Article()`` is a draft dated today with both timestamps set to
    now. ``id`` stays ``None`` until the store persists the article.

    Assigning one of the editable fields (``article.title = ...``) refreshes
    ``updated_at``; assigning ``status`` also checks it against
    ``ArticleStatus`` and raises ``InvalidStatusError`` without changing
    anything when it does not match.

    Equality and hash follow ``id``. The hash of an unsaved article changes
    when the store assigns its id, so put articles in sets or dict keys only
    after they are saved.
    """

    title: str | None = None
    content: str | None = field(default=None, repr=False)
    region: str | None = None
    language: str | None = None
    author: str | None = None
    category: str | None = None
    date: dt.date | None = field(default_factory=dt.date.today)
    status: ArticleStatus | None = ArticleStatus.DRAFT
    id: int | None = None
    created_at: dt.datetime | None = field(default_factory=_now)
    updated_at: dt.datetime | None = field(default_factory=_now)

    def __setattr__(self, name: str, value: Any) -> None:
        # updated_at is the last dataclass field, so it only exists once __init__ is done
        initialized = "updated_at" in self.__dict__
        if name == "status" and (initialized or value is not None):
            value = ArticleStatus.parse(value)
        super().__setattr__(name, value)
        if initialized and name in _MUTABLE_FIELDS:
            super().__setattr__("updated_at", _now())

    @classmethod
    def from_fields(
        cls,
        id: int | None,
        title: str | None,
        author: str | None,
        category: str | None,
        content: str | None,
        region: str | None,
        language: str | None,
        date: dt.date | None,
        status: ArticleStatus | str | None,
    ) -> "Article":
        """Build an article from an explicit field set, without a default status.

        ``status=None`` is accepted here and reported by ``validation_errors()``.
        """
        return cls(
            id=id,
            title=title,
            author=author,
            category=category,
            content=content,
            region=region,
            language=language,
            date=date,
            status=status,
        )

    def update(self, **changes: Any) -> None:
        """Apply several field changes at once; ``None`` values are skipped.

        The status is checked before any field is touched, so a bad status
        leaves the whole article unchanged.
        """
        unknown = set(changes) - _MUTABLE_FIELDS
        if unknown:
            raise TypeError(f"Not editable: {', '.join(sorted(unknown))}")
        if changes.get("status") is not None:
            changes["status"] = ArticleStatus.parse(changes["status"])
        for name, value in changes.items():
            if value is not None:
                setattr(self, name, value)

    # ── Validation ──────────────────────────────────────────────────

    def _violations(self) -> list[str]:
        errors: list[str] = []
        if _is_blank(self.title):
            errors.append("Title is required.")
        if _is_blank(self.content):
            errors.append("Content is required.")
        if _is_blank(self.region):
            errors.append("Region is required.")
        if _is_blank(self.language):
            errors.append("Language is required.")
        if self.date is None:
            errors.append("Date is required.")
        if not isinstance(self.status, ArticleStatus):
            errors.append("Invalid status.")
        return errors

    def is_valid(self) -> bool:
        """True when the article can be persisted."""
        return not self._violations()

    def validation_errors(self) -> str:
        """Every violated rule, space-joined; empty when valid."""
        return " ".join(self._violations())

    def validate(self) -> None:
        """Raise ArticleValidationError listing every violated rule."""
        errors = self._violations()
        if errors:
            raise ArticleValidationError(errors)

    # ── Display helpers ─────────────────────────────────────────────

    @property
    def formatted_date(self) -> str:
        return self.date.strftime("%d/%m/%Y") if self.date else ""

    @property
    def formatted_created_at(self) -> str:
        return self.created_at.strftime("%d/%m/%Y %H:%M") if self.created_at else ""

    def truncated_content(self, max_length: int = 50) -> str:
        """Content clipped to ``max_length`` characters, with "..." when clipped."""
        if self.content is None:
            return ""
        if len(self.content) > max_length:
            return self.content[:max_length] + "..."
        return self.content

    # ── Identity ────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Article):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
