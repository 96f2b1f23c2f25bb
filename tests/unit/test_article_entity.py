"""Unit tests for the Article entity."""

import datetime as dt

import pytest

from news_agency.domain.entities import Article, ArticleStatus
from news_agency.domain.exceptions import ArticleValidationError, InvalidStatusError

OLD = dt.datetime(2000, 1, 1, 12, 0)


def _aged(article: Article) -> Article:
    """Push updated_at into the past so a refresh is always observable."""
    article.updated_at = OLD
    return article


def test_defaults_make_a_dated_draft():
    article = Article()
    assert article.id is None
    assert article.status is ArticleStatus.DRAFT
    assert article.date == dt.date.today()
    assert article.created_at is not None
    assert article.updated_at is not None


def test_from_fields_applies_no_default_status():
    article = Article.from_fields(
        id=3,
        title="T",
        author=None,
        category=None,
        content="C",
        region="R",
        language="L",
        date=dt.date(2024, 1, 1),
        status=None,
    )
    assert article.status is None
    assert not article.is_valid()
    assert article.validation_errors() == "Invalid status."


def test_from_fields_accepts_status_string():
    article = Article.from_fields(1, "T", "A", "Cat", "C", "R", "L", dt.date(2024, 1, 1), "published")
    assert article.status is ArticleStatus.PUBLISHED
    assert article.is_valid()


@pytest.mark.parametrize("value", ["draft", "published", "pending", "archived"])
def test_valid_status_is_set_and_refreshes_updated_at(value):
    article = _aged(Article(title="T", content="C", region="R", language="L"))
    article.status = value
    assert article.status == ArticleStatus(value)
    assert article.updated_at > OLD


@pytest.mark.parametrize("member", list(ArticleStatus))
def test_status_member_is_accepted(member):
    article = Article()
    article.status = member
    assert article.status is member


@pytest.mark.parametrize("value", ["", "deleted", "Published", "DRAFT", " draft", None, 1])
def test_invalid_status_fails_and_leaves_state_unchanged(value):
    article = _aged(Article(status=ArticleStatus.PENDING))
    with pytest.raises(InvalidStatusError):
        article.status = value
    assert article.status is ArticleStatus.PENDING
    assert article.updated_at == OLD


def test_invalid_status_error_is_a_value_error():
    with pytest.raises(ValueError):
        ArticleStatus.parse("bogus")


@pytest.mark.parametrize(
    "field_name, value",
    [
        ("title", "New title"),
        ("author", "Jane"),
        ("category", "Politics"),
        ("content", "New content"),
        ("region", "Kerala"),
        ("language", "Malayalam"),
        ("date", dt.date(2023, 5, 6)),
    ],
)
def test_field_mutators_refresh_updated_at(field_name, value):
    article = _aged(Article())
    setattr(article, field_name, value)
    assert getattr(article, field_name) == value
    assert article.updated_at > OLD


def test_identifier_and_timestamp_setters_do_not_refresh_updated_at():
    article = _aged(Article())
    article.id = 42
    article.created_at = dt.datetime(2020, 2, 2)
    assert article.updated_at == OLD


def test_update_applies_changes_and_skips_none():
    article = _aged(Article(title="Old", content="Body", author="Ann"))
    article.update(title="New", author=None, status="archived")
    assert article.title == "New"
    assert article.author == "Ann"
    assert article.status is ArticleStatus.ARCHIVED
    assert article.updated_at > OLD


def test_update_with_invalid_status_changes_nothing():
    article = _aged(Article(title="Old"))
    with pytest.raises(InvalidStatusError):
        article.update(title="New", status="gone")
    assert article.title == "Old"
    assert article.updated_at == OLD


def test_update_rejects_non_editable_fields():
    with pytest.raises(TypeError):
        Article().update(id=5)


# ── Validation ──────────────────────────────────────────────────────


def test_complete_article_is_valid():
    article = Article(title="T", content="C", region="R", language="L")
    assert article.is_valid()
    assert article.validation_errors() == ""
    article.validate()


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"title": None}, "Title is required."),
        ({"title": "   "}, "Title is required."),
        ({"content": ""}, "Content is required."),
        ({"region": "\t"}, "Region is required."),
        ({"language": None}, "Language is required."),
        ({"date": None}, "Date is required."),
        ({"status": None}, "Invalid status."),
    ],
)
def test_each_violation_is_reported(overrides, expected):
    fields = {"title": "T", "content": "C", "region": "R", "language": "L"}
    fields.update(overrides)
    article = Article(**fields)
    assert not article.is_valid()
    assert article.validation_errors() == expected


def test_all_violations_are_listed_in_fixed_order():
    article = Article.from_fields(None, " ", None, None, None, "", None, None, None)
    assert article.validation_errors() == (
        "Title is required. Content is required. Region is required. "
        "Language is required. Date is required. Invalid status."
    )


def test_validate_raises_with_every_error():
    article = Article(title="T", content="C")
    with pytest.raises(ArticleValidationError) as exc_info:
        article.validate()
    assert exc_info.value.errors == ["Region is required.", "Language is required."]


def test_is_valid_has_no_side_effects():
    article = _aged(Article())
    article.is_valid()
    article.validation_errors()
    assert article.updated_at == OLD


# ── Display helpers ─────────────────────────────────────────────────


def test_truncated_content_clips_with_ellipsis():
    assert Article(content="Hello World").truncated_content(5) == "Hello..."


def test_truncated_content_keeps_short_content():
    assert Article(content="Hello").truncated_content(5) == "Hello"


def test_truncated_content_of_missing_content_is_empty():
    assert Article().truncated_content(5) == ""


def test_formatted_date_and_created_at():
    article = Article(date=dt.date(2024, 1, 5), created_at=dt.datetime(2024, 1, 5, 9, 7))
    assert article.formatted_date == "05/01/2024"
    assert article.formatted_created_at == "05/01/2024 09:07"


def test_formatted_values_are_empty_when_absent():
    article = Article(date=None, created_at=None)
    assert article.formatted_date == ""
    assert article.formatted_created_at == ""


# ── Identity ────────────────────────────────────────────────────────


def test_equality_is_defined_by_id():
    first = Article(id=7, title="A")
    second = Article(id=7, title="B")
    assert first == second
    assert hash(first) == hash(second)
    assert first != Article(id=8, title="A")


def test_unsaved_articles_are_only_equal_to_themselves():
    first = Article(title="A")
    second = Article(title="A")
    assert first == first
    assert first != second


def test_hash_follows_the_assigned_id():
    article = Article(title="A")
    article.id = 11
    assert hash(article) == hash(Article(id=11))
    assert article in {Article(id=11)}
