from .article import Article, ArticleStatus
from .query import ArticleFilterSet, ArticleStatistics

__all__ = [
    "Article",
    "ArticleStatus",
    "ArticleFilterSet",
    "ArticleStatistics",
]
