"""Concrete article store backed by SQLAlchemy."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Select, case, delete, func, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from news_agency.application.interfaces import ArticleRepository
from news_agency.domain.entities import Article, ArticleFilterSet, ArticleStatistics, ArticleStatus
from news_agency.domain.exceptions import PersistenceError
from news_agency.infrastructure.database.models import ArticleModel
from news_agency.infrastructure.logging.colored_logger import OperationLogger, Stage, StoreStage

# Columns an ArticleFilterSet may constrain, keyed by filter name.
_FILTER_COLUMNS = {
    "region": ArticleModel.region,
    "language": ArticleModel.language,
    "status": ArticleModel.status,
}

_NEWEST_FIRST = (ArticleModel.created_at.desc(), ArticleModel.id.desc())


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port on a single SQLAlchemy session.

    Every operation runs in its own short transaction: writes are committed
    before the method returns, and any SQLAlchemy failure is rolled back and
    re-raised as PersistenceError with the original exception as its cause.
    Nothing is retried.
    """

    def __init__(self, session: Session):
        self._session = session
        self._log = OperationLogger(__name__)

    @contextmanager
    def _transaction(
        self, stage: Stage, message: str, **details: Any
    ) -> Iterator[Session]:
        with self._log.timed_step(stage, message, **details):
            try:
                with self._session.begin():
                    yield self._session
            except SQLAlchemyError as exc:
                raise PersistenceError(f"{message} failed", exc) from exc

    # ── Mapping ─────────────────────────────────────────────────────

    @staticmethod
    def _to_entity(model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            author=model.author,
            category=model.category,
            content=model.content,
            region=model.region,
            language=model.language,
            date=model.date,
            status=model.status,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _column_values(article: Article) -> dict[str, Any]:
        """Entity → the column values written by both INSERT and UPDATE."""
        return {
            "title": article.title,
            "author": article.author,
            "category": article.category,
            "content": article.content,
            "region": article.region,
            "language": article.language,
            "date": article.date,
            "status": article.status.value if article.status is not None else None,
        }

    def _fetch(self, stmt: Select) -> list[Article]:
        return [self._to_entity(model) for model in self._session.scalars(stmt).all()]

    # ── Commands ────────────────────────────────────────────────────

    def create(self, article: Article) -> int:
        with self._transaction(StoreStage.CREATE, "Creating article", title=article.title) as session:
            model = ArticleModel(**self._column_values(article))
            session.add(model)
            session.flush()
            new_id = model.id
            if new_id is None:
                raise PersistenceError("Failed to create article, no ID obtained.")
        article.id = new_id
        self._log.detail("Assigned article id", article_id=new_id)
        return new_id

    def update(self, article: Article) -> bool:
        if article.id is None:
            return False
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article.id)
            .values(**self._column_values(article), updated_at=func.now())
            .execution_options(synchronize_session=False)
        )
        with self._transaction(StoreStage.UPDATE, "Updating article", article_id=article.id) as session:
            rowcount = session.execute(stmt).rowcount
        return rowcount > 0

    def delete(self, article_id: int) -> bool:
        stmt = (
            delete(ArticleModel)
            .where(ArticleModel.id == article_id)
            .execution_options(synchronize_session=False)
        )
        with self._transaction(StoreStage.DELETE, "Deleting article", article_id=article_id) as session:
            rowcount = session.execute(stmt).rowcount
        return rowcount > 0

    # ── Queries ─────────────────────────────────────────────────────

    def get_by_id(self, article_id: int) -> Article | None:
        stmt = select(ArticleModel).where(ArticleModel.id == article_id)
        with self._transaction(StoreStage.READ, "Fetching article", article_id=article_id):
            found = self._fetch(stmt)
        return found[0] if found else None

    def get_all(
        self,
        region: str | None = None,
        language: str | None = None,
        status: ArticleStatus | str | None = None,
    ) -> list[Article]:
        filters = ArticleFilterSet(region=region, language=language, status=status).active()
        stmt = select(ArticleModel)
        for name, value in filters.items():
            stmt = stmt.where(_FILTER_COLUMNS[name] == value)
        stmt = stmt.order_by(*_NEWEST_FIRST)
        with self._transaction(StoreStage.READ, "Listing articles", **filters):
            return self._fetch(stmt)

    def get_published(self) -> list[Article]:
        return self.get_all(status=ArticleStatus.PUBLISHED)

    def search(self, term: str) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(
                or_(
                    ArticleModel.title.icontains(term, autoescape=True),
                    ArticleModel.content.icontains(term, autoescape=True),
                )
            )
            .order_by(*_NEWEST_FIRST)
        )
        with self._transaction(StoreStage.SEARCH, "Searching articles", term=term):
            return self._fetch(stmt)

    def get_distinct_regions(self) -> list[str]:
        return self._distinct(ArticleModel.region)

    def get_distinct_languages(self) -> list[str]:
        return self._distinct(ArticleModel.language)

    def _distinct(self, column) -> list[str]:
        stmt = select(column).where(column.is_not(None)).distinct().order_by(column)
        with self._transaction(StoreStage.READ, f"Listing distinct {column.key} values") as session:
            return list(session.scalars(stmt).all())

    def get_statistics(self) -> ArticleStatistics:
        stmt = select(
            func.count().label("total"),
            *(
                func.count(case((ArticleModel.status == status.value, 1))).label(status.value)
                for status in ArticleStatus
            ),
        ).select_from(ArticleModel)
        with self._transaction(StoreStage.STATS, "Counting articles") as session:
            row = session.execute(stmt).one()
        return ArticleStatistics(**row._asdict())
