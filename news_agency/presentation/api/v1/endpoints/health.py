"""Health check endpoint."""

from fastapi import APIRouter, Depends, Request

from news_agency.infrastructure.database import Database
from news_agency.infrastructure.dependencies import get_database

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request, database: Database = Depends(get_database)) -> dict:
    """Returns the application health status, including database reachability."""
    settings = request.app.state.settings
    database_ok = database.test_connection()
    return {
        "status": "healthy" if database_ok else "degraded",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": "ok" if database_ok else "unavailable",
    }
