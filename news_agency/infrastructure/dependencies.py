"""FastAPI dependency injection — wires infrastructure to application layer."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from news_agency.application.services import ArticleService
from news_agency.infrastructure.database import Database
from news_agency.infrastructure.database.repositories import SQLAlchemyArticleRepository


async def get_database(request: Request) -> Database:
    """The Database created by the app factory — one per application."""
    return request.app.state.database


async def get_db_session(database: Database = Depends(get_database)) -> Session:
    """The database's single session, connecting on first use.

    Declared async so it runs on the event loop thread, like the endpoints
    that use it; requests therefore reach the session one at a time.
    """
    return database.session()


async def get_article_service(session: Session = Depends(get_db_session)) -> ArticleService:
    """Provides an ArticleService instance with its repository wired up."""
    return ArticleService(SQLAlchemyArticleRepository(session))
