"""Abstract repository interface (port) — defines the contract, not the implementation."""

from abc import ABC, abstractmethod

from news_agency.domain.entities import Article, ArticleStatistics, ArticleStatus


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Lookups that find nothing return ``None`` / ``False``; only real
    database failures raise (``PersistenceError``).
    """

    @abstractmethod
    def create(self, article: Article) -> int:
        """Persist a new article, assign the generated ID onto it and return the ID."""
        ...

    @abstractmethod
    def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID, or None when absent."""
        ...

    @abstractmethod
    def get_all(
        self,
        region: str | None = None,
        language: str | None = None,
        status: ArticleStatus | str | None = None,
    ) -> list[Article]:
        """Articles matching every non-blank filter, newest first."""
        ...

    @abstractmethod
    def get_published(self) -> list[Article]:
        """Published articles, newest first."""
        ...

    @abstractmethod
    def update(self, article: Article) -> bool:
        """Overwrite the stored row with the entity's fields. False if no row has its ID."""
        ...

    @abstractmethod
    def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    def search(self, term: str) -> list[Article]:
        """Articles whose title or content contains ``term``, ignoring case."""
        ...

    @abstractmethod
    def get_distinct_regions(self) -> list[str]:
        ...

    @abstractmethod
    def get_distinct_languages(self) -> list[str]:
        ...

    @abstractmethod
    def get_statistics(self) -> ArticleStatistics:
        """Total article count and the count per status."""
        ...
