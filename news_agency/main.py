"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from news_agency.config import Settings, get_settings
from news_agency.domain.exceptions import ArticleValidationError, PersistenceError
from news_agency.infrastructure.database import Database
from news_agency.infrastructure.database.repositories import SQLAlchemyArticleRepository
from news_agency.infrastructure.database.seed import seed_sample_articles
from news_agency.infrastructure.logging.log_config import setup_logging
from news_agency.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — connect, bootstrap the schema, optionally seed."""
    settings: Settings = app.state.settings
    database: Database = app.state.database
    setup_logging(settings)

    # A database that cannot be reached at startup is fatal: let it raise.
    session = database.session()
    if settings.seed_sample_data:
        inserted = seed_sample_articles(SQLAlchemyArticleRepository(session))
        if inserted:
            logger.info("Seeded %d sample articles", inserted)

    yield

    database.close()


async def _validation_error_handler(request: Request, exc: ArticleValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors},
    )


async def _persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Database unavailable"},
    )


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the API around one explicitly owned Database."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database or Database(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(ArticleValidationError, _validation_error_handler)
    app.add_exception_handler(PersistenceError, _persistence_error_handler)
    app.include_router(api_router)
    return app


app = create_app()
