"""Application service (use case) for Article operations."""

import logging
from typing import Any

from news_agency.application.interfaces import ArticleRepository
from news_agency.domain.entities import Article, ArticleStatistics, ArticleStatus
from news_agency.domain.exceptions import ArticleValidationError, EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Articles are validated here, before they reach the store.
    """

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    def find_article(self, article_id: int) -> Article | None:
        return self._repository.get_by_id(article_id)

    def get_article(self, article_id: int) -> Article:
        article = self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    def list_articles(
        self,
        region: str | None = None,
        language: str | None = None,
        status: ArticleStatus | str | None = None,
    ) -> list[Article]:
        return self._repository.get_all(region=region, language=language, status=status)

    def list_published(self) -> list[Article]:
        return self._repository.get_published()

    def search_articles(self, term: str) -> list[Article]:
        if not term or not term.strip():
            raise ArticleValidationError(["Search term cannot be empty."])
        return self._repository.search(term.strip())

    def get_filter_options(self) -> tuple[list[str], list[str]]:
        """Distinct regions and languages, each sorted."""
        return (
            self._repository.get_distinct_regions(),
            self._repository.get_distinct_languages(),
        )

    def get_statistics(self) -> ArticleStatistics:
        return self._repository.get_statistics()

    def create_article(self, article: Article) -> Article:
        article.validate()
        article_id = self._repository.create(article)
        logger.info("Created article %d", article_id)
        return article

    def update_article(self, article: Article) -> Article:
        article.validate()
        if article.id is None or not self._repository.update(article):
            raise EntityNotFoundError("Article", article.id if article.id is not None else "<unsaved>")
        logger.info("Updated article %d", article.id)
        return article

    def apply_changes(self, article_id: int, **changes: Any) -> Article:
        """Fetch, apply the non-None ``changes``, validate and store."""
        article = self.get_article(article_id)
        article.update(**changes)
        return self.update_article(article)

    def delete_article(self, article_id: int) -> None:
        if not self._repository.delete(article_id):
            raise EntityNotFoundError("Article", article_id)
        logger.info("Deleted article %d", article_id)
