from .article import (
    ArticleCreate,
    ArticleResponse,
    ArticleStatisticsResponse,
    ArticleUpdate,
    FilterOptionsResponse,
    PublishedArticleResponse,
)

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "PublishedArticleResponse",
    "FilterOptionsResponse",
    "ArticleStatisticsResponse",
]
