from .base import Base
from .session import Database, create_db_engine
from .models import ArticleModel

__all__ = [
    "Base",
    "Database",
    "create_db_engine",
    "ArticleModel",
]
