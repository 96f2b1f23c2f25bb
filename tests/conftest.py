"""Shared fixtures: an in-memory SQLite database behind the real store."""

import datetime as dt
from collections.abc import Callable, Iterator

import pytest

from news_agency.config import Settings
from news_agency.domain.entities import Article, ArticleStatus
from news_agency.infrastructure.database import Database
from news_agency.infrastructure.database.repositories import SQLAlchemyArticleRepository


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, database_url_override="sqlite://", seed_sample_data=False)


@pytest.fixture
def database(settings: Settings) -> Iterator[Database]:
    db = Database(settings)
    yield db
    db.close()


@pytest.fixture
def repository(database: Database) -> SQLAlchemyArticleRepository:
    return SQLAlchemyArticleRepository(database.session())


@pytest.fixture
def make_article() -> Callable[..., Article]:
    """Factory for valid articles; keyword arguments override the defaults."""

    def _make(**overrides) -> Article:
        fields = {
            "title": "T",
            "content": "C",
            "region": "R",
            "language": "L",
            "date": dt.date(2024, 1, 1),
            "status": ArticleStatus.DRAFT,
        }
        fields.update(overrides)
        return Article(**fields)

    return _make
