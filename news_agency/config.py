import logging
from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Connection parameters follow the libpq variable names (PGHOST, PGPORT, ...)
    so the same environment works for psql and for this application.
    """

    app_title: str = "News Agency Manager"
    app_version: str = "1.0.0"
    app_env: str = "development"

    # PostgreSQL connection
    db_host: str = Field("localhost", validation_alias=AliasChoices("PGHOST", "db_host"))
    db_port: str = Field("5432", validation_alias=AliasChoices("PGPORT", "db_port"))
    db_name: str = Field("news_agency", validation_alias=AliasChoices("PGDATABASE", "db_name"))
    db_user: str = Field("postgres", validation_alias=AliasChoices("PGUSER", "db_user"))
    db_password: str = Field("", validation_alias=AliasChoices("PGPASSWORD", "db_password"))
    # Full SQLAlchemy URL; wins over the individual PG* parts when set
    database_url_override: str | None = Field(
        None, validation_alias=AliasChoices("DATABASE_URL", "database_url_override")
    )
    db_connect_timeout: int = 5
    db_echo: bool = False

    # Insert the demo articles when the table is empty at startup
    seed_sample_data: bool = False

    # HTTP API (news-agency serve)
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    # Browser front-ends allowed to call the API
    cors_origins: list[str] = ["*"]

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL statements
    log_level_store: str = "INFO"            # article store + connection owner
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @property
    def database_url(self) -> str | URL:
        """SQLAlchemy URL for the article database."""
        if self.database_url_override:
            return self.database_url_override
        return URL.create(
            "postgresql+psycopg",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=int(self.db_port),
            database=self.db_name,
        )

    def model_post_init(self, __context: object) -> None:
        """Reject a non-numeric port early instead of at first connect."""
        if not self.database_url_override and not self.db_port.strip().isdigit():
            _config_logger.warning("Invalid PGPORT '%s', falling back to 5432", self.db_port)
            object.__setattr__(self, "db_port", "5432")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
