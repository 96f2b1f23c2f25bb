"""SQLAlchemy ORM model for the Article entity."""

import datetime as dt

from sqlalchemy import CheckConstraint, Date, DateTime, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from news_agency.domain.entities import ArticleStatus
from news_agency.infrastructure.database.base import Base

_STATUS_VALUES = ", ".join(f"'{status.value}'" for status in ArticleStatus)


class ArticleModel(Base):
    """ORM model — maps to the 'articles' table."""

    __tablename__ = "articles"
    __table_args__ = (
        CheckConstraint(f"status IN ({_STATUS_VALUES})", name="ck_articles_status"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str | None] = mapped_column(String(100))
    category: Mapped[str | None] = mapped_column(String(50))
    content: Mapped[str] = mapped_column(Text, nullable=False)
    region: Mapped[str | None] = mapped_column(String(100))
    language: Mapped[str | None] = mapped_column(String(50))
    date: Mapped[dt.date | None] = mapped_column(Date)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        server_default=ArticleStatus.DRAFT.value,
    )
    created_at: Mapped[dt.datetime | None] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[dt.datetime | None] = mapped_column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, title='{self.title}', status='{self.status}')>"


Index("idx_articles_status", ArticleModel.status)
Index("idx_articles_region", ArticleModel.region)
Index("idx_articles_language", ArticleModel.language)
Index("idx_articles_created_at", ArticleModel.created_at.desc())
