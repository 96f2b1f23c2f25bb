"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

import datetime as dt

from pydantic import BaseModel, Field, field_validator

from news_agency.domain.entities import ArticleStatus

CONTENT_MAX_LENGTH = 5000


def _not_in_future(value: dt.date | None) -> dt.date | None:
    if value is not None and value > dt.date.today():
        raise ValueError("Date cannot be in the future")
    return value


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Climate Change Summit Results"])
    content: str = Field(..., min_length=1, max_length=CONTENT_MAX_LENGTH, examples=["World leaders concluded the climate summit..."])
    region: str = Field(..., min_length=1, max_length=100, examples=["National"])
    language: str = Field(..., min_length=1, max_length=50, examples=["English"])
    author: str | None = Field(None, max_length=100)
    category: str | None = Field(None, max_length=50)
    date: dt.date | None = Field(None, description="Defaults to today")
    status: ArticleStatus = ArticleStatus.DRAFT

    check_date = field_validator("date")(_not_in_future)


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1, max_length=CONTENT_MAX_LENGTH)
    region: str | None = Field(None, min_length=1, max_length=100)
    language: str | None = Field(None, min_length=1, max_length=50)
    author: str | None = Field(None, max_length=100)
    category: str | None = Field(None, max_length=50)
    date: dt.date | None = None
    status: ArticleStatus | None = None

    check_date = field_validator("date")(_not_in_future)


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    author: str | None = None
    category: str | None = None
    content: str
    region: str | None = None
    language: str | None = None
    date: dt.date | None = None
    status: ArticleStatus
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None

    model_config = {"from_attributes": True}


class PublishedArticleResponse(ArticleResponse):
    """Public feed entry — the newest three are flagged as featured."""

    featured: bool = False


class FilterOptionsResponse(BaseModel):
    regions: list[str]
    languages: list[str]


class ArticleStatisticsResponse(BaseModel):
    total: int
    published: int
    draft: int
    pending: int
    archived: int
