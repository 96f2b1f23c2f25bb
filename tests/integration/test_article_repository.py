"""Integration tests for the SQLAlchemy article store against in-memory SQLite."""

import datetime as dt
from pathlib import Path

import pytest
from sqlalchemy import inspect, update

from news_agency.config import Settings
from news_agency.domain.entities import ArticleStatus
from news_agency.domain.exceptions import InvalidStatusError, PersistenceError
from news_agency.infrastructure.database import ArticleModel, Database
from news_agency.infrastructure.database.repositories import SQLAlchemyArticleRepository
from news_agency.infrastructure.database.seed import SAMPLE_ARTICLES, seed_sample_articles

EXPECTED_INDEXES = {
    "idx_articles_status",
    "idx_articles_region",
    "idx_articles_language",
    "idx_articles_created_at",
}


def _age_row(database: Database, article_id: int) -> None:
    """Backdate a row's updated_at so the next write visibly advances it."""
    session = database.session()
    with session.begin():
        session.execute(
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values(updated_at=dt.datetime(2000, 1, 1))
        )


# ── Connection owner ────────────────────────────────────────────────


def test_session_bootstraps_table_and_indexes(database: Database):
    database.session()
    inspector = inspect(database.engine)
    assert "articles" in inspector.get_table_names()
    assert EXPECTED_INDEXES <= {index["name"] for index in inspector.get_indexes("articles")}


def test_bootstrap_is_idempotent(database: Database):
    database.session()
    database.bootstrap()
    database.bootstrap()
    assert database.test_connection()


def test_close_then_reconnect(database: Database):
    database.session()
    assert database.is_connected
    database.close()
    assert not database.is_connected
    database.close()
    assert database.session() is not None
    assert database.test_connection()


def test_unreachable_database_raises_persistence_error(tmp_path: Path):
    missing = tmp_path / "no-such-dir" / "articles.db"
    settings = Settings(_env_file=None, database_url_override=f"sqlite:///{missing}")
    with Database(settings) as database:
        with pytest.raises(PersistenceError):
            database.session()
        assert not database.is_connected
        assert database.test_connection() is False


def test_context_manager_closes(settings: Settings):
    with Database(settings) as database:
        database.session()
    assert not database.is_connected


# ── Commands ────────────────────────────────────────────────────────


def test_create_assigns_id_and_round_trips(repository, make_article):
    article = make_article(title="Round trip", author="Ann", category="Tech", status=ArticleStatus.PENDING)
    new_id = repository.create(article)

    assert new_id == article.id
    stored = repository.get_by_id(new_id)
    assert stored == article
    assert stored.title == "Round trip"
    assert stored.author == "Ann"
    assert stored.category == "Tech"
    assert stored.content == "C"
    assert stored.date == dt.date(2024, 1, 1)
    assert stored.status is ArticleStatus.PENDING
    assert stored.created_at is not None
    assert stored.updated_at is not None


def test_ids_are_distinct(repository, make_article):
    ids = {repository.create(make_article()) for _ in range(3)}
    assert len(ids) == 3


def test_optional_fields_may_be_absent(repository, make_article):
    new_id = repository.create(make_article(author=None, category=None, date=None))
    stored = repository.get_by_id(new_id)
    assert stored.author is None
    assert stored.category is None
    assert stored.date is None


def test_get_by_id_missing_is_none(repository):
    assert repository.get_by_id(12345) is None


def test_update_writes_fields_and_advances_updated_at(database, repository, make_article):
    article = make_article(title="Old")
    repository.create(article)
    _age_row(database, article.id)

    article.title = "New"
    article.status = "published"
    assert repository.update(article) is True

    stored = repository.get_by_id(article.id)
    assert stored.title == "New"
    assert stored.status is ArticleStatus.PUBLISHED
    assert stored.updated_at > dt.datetime(2000, 1, 1)


def test_update_missing_or_unsaved_article_leaves_table_unchanged(repository, make_article):
    existing_id = repository.create(make_article(title="Kept", region="Delhi"))
    before = repository.get_by_id(existing_id)

    assert repository.update(make_article()) is False
    assert repository.update(make_article(id=existing_id + 100, title="Ghost")) is False

    assert repository.get_statistics().total == 1
    after = repository.get_by_id(existing_id)
    assert (after.title, after.region, after.status) == ("Kept", "Delhi", ArticleStatus.DRAFT)
    assert after.updated_at == before.updated_at
    assert repository.search("Ghost") == []


def test_delete(repository, make_article):
    article_id = repository.create(make_article())
    assert repository.delete(article_id) is True
    assert repository.get_by_id(article_id) is None
    assert repository.delete(article_id) is False


# ── Queries ─────────────────────────────────────────────────────────


def test_get_all_newest_first_with_id_tie_break(repository, make_article):
    first = repository.create(make_article(region="R"))
    second = repository.create(make_article(region="R"))
    other = repository.create(make_article(region="S"))

    assert [a.id for a in repository.get_all()] == [other, second, first]
    assert [a.id for a in repository.get_all(region="R")] == [second, first]


def test_get_all_combines_filters(repository, make_article):
    repository.create(make_article(region="Delhi", language="Hindi"))
    match = repository.create(make_article(region="Delhi", language="Hindi", status=ArticleStatus.PUBLISHED))
    repository.create(make_article(region="Delhi", language="English", status=ArticleStatus.PUBLISHED))

    found = repository.get_all(region="Delhi", language="Hindi", status="published")
    assert [a.id for a in found] == [match]


def test_blank_filters_are_ignored(repository, make_article):
    repository.create(make_article())
    assert len(repository.get_all(region="", language="  ", status=None)) == 1


def test_unknown_status_filter_raises(repository):
    with pytest.raises(InvalidStatusError):
        repository.get_all(status="gone")


def test_get_published(repository, make_article):
    repository.create(make_article(status=ArticleStatus.DRAFT))
    published = repository.create(make_article(status=ArticleStatus.PUBLISHED))
    repository.create(make_article(status=ArticleStatus.ARCHIVED))
    assert [a.id for a in repository.get_published()] == [published]


def test_search_matches_title_or_content_case_insensitively(repository, make_article):
    by_title = repository.create(make_article(title="Metro Line Opens", content="x"))
    by_content = repository.create(make_article(title="City news", content="the new METRO station"))
    repository.create(make_article(title="Weather", content="rain"))

    assert [a.id for a in repository.search("metro")] == [by_content, by_title]
    assert repository.search("nothing like this") == []


def test_search_treats_wildcards_literally(repository, make_article):
    literal = repository.create(make_article(title="100% growth"))
    repository.create(make_article(title="1000 growth"))
    repository.create(make_article(title="a_b"))
    repository.create(make_article(title="axb"))

    assert [a.id for a in repository.search("100%")] == [literal]
    assert [a.title for a in repository.search("a_b")] == ["a_b"]


def test_distinct_regions_and_languages_are_sorted(repository, make_article):
    repository.create(make_article(region="Telangana", language="Telugu"))
    repository.create(make_article(region="Delhi", language="Hindi"))
    repository.create(make_article(region="Delhi", language="English"))

    assert repository.get_distinct_regions() == ["Delhi", "Telangana"]
    assert repository.get_distinct_languages() == ["English", "Hindi", "Telugu"]


def test_statistics(repository, make_article):
    assert repository.get_statistics().total == 0
    for status in ("draft", "published", "published", "archived"):
        repository.create(make_article(status=status))

    stats = repository.get_statistics()
    assert stats.as_dict() == {"total": 4, "published": 2, "draft": 1, "pending": 0, "archived": 1}


def test_missing_table_surfaces_as_persistence_error(database, repository):
    ArticleModel.__table__.drop(database.engine)
    with pytest.raises(PersistenceError) as exc_info:
        repository.get_all()
    assert exc_info.value.cause is not None
    assert exc_info.value.__cause__ is exc_info.value.cause


def test_store_recovers_after_a_failed_operation(database, repository, make_article):
    ArticleModel.__table__.drop(database.engine)
    with pytest.raises(PersistenceError):
        repository.get_statistics()
    database.bootstrap()
    repository.create(make_article())
    assert repository.get_statistics().total == 1


# ── Sample data ─────────────────────────────────────────────────────


def test_seed_inserts_published_samples_once(repository):
    assert seed_sample_articles(repository) == len(SAMPLE_ARTICLES)
    assert seed_sample_articles(repository) == 0

    stats = repository.get_statistics()
    assert stats.total == len(SAMPLE_ARTICLES)
    assert stats.published == len(SAMPLE_ARTICLES)
    assert "Telangana" in repository.get_distinct_regions()


def test_seed_skips_non_empty_table(repository, make_article):
    repository.create(make_article())
    assert seed_sample_articles(repository) == 0
    assert repository.get_statistics().total == 1
