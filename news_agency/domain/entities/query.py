"""Domain objects for article listing queries — filters and aggregate counts."""

from dataclasses import asdict, dataclass

from news_agency.domain.entities.article import ArticleStatus


@dataclass
class ArticleFilterSet:
    """Optional equality filters for listing articles.

    Each attribute maps a filterable column to the value it must equal;
    ``None`` or a blank string means "no filter on this column".
    """

    region: str | None = None
    language: str | None = None
    status: ArticleStatus | str | None = None

    def active(self) -> dict[str, str]:
        """Non-blank filters, in column order (region, language, status)."""
        filters: dict[str, str] = {}
        if self.region is not None and self.region.strip():
            filters["region"] = self.region
        if self.language is not None and self.language.strip():
            filters["language"] = self.language
        if isinstance(self.status, ArticleStatus):
            filters["status"] = self.status.value
        elif self.status is not None and self.status.strip():
            filters["status"] = ArticleStatus.parse(self.status.strip()).value
        return filters

    def is_empty(self) -> bool:
        return not self.active()


@dataclass
class ArticleStatistics:
    """Article counts: the total and one count per status."""

    total: int = 0
    published: int = 0
    draft: int = 0
    pending: int = 0
    archived: int = 0

    def by_status(self) -> dict[ArticleStatus, int]:
        return {status: getattr(self, status.value) for status in ArticleStatus}

    def as_dict(self) -> dict[str, int]:
        return asdict(self)
