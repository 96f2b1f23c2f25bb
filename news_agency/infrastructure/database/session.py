"""SQLAlchemy engine configuration and the owner of the store's single session."""

import logging
from types import TracebackType

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from news_agency.config import Settings, get_settings
from news_agency.domain.exceptions import PersistenceError
from news_agency.infrastructure.database.base import Base
from news_agency.infrastructure.database.models import ArticleModel
from news_agency.infrastructure.logging.colored_logger import OperationLogger, StoreStage

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    """Build the engine for ``settings.database_url``.

    In-memory SQLite gets a StaticPool so every checkout sees the same database.
    """
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite":
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs = {
            "connect_args": {"connect_timeout": settings.db_connect_timeout},
            "pool_pre_ping": True,
        }
    return create_engine(url, echo=settings.db_echo, **kwargs)


class Database:
    """Owns the engine and the one Session the article store works through.

    Construct it explicitly and pass it (or its session) to whoever needs
    the store. It is meant for a single owner issuing one operation at a
    time; it is not safe to share between threads.

    Nothing connects until ``session()`` is first called. The schema
    bootstrap runs every time a session is established.
    """

    def __init__(self, settings: Settings | None = None, engine: Engine | None = None):
        self._settings = settings or get_settings()
        self._engine = engine
        self._owns_engine = engine is None
        self._session: Session | None = None
        self._log = OperationLogger(__name__, level=logging.INFO)

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_db_engine(self._settings)
        return self._engine

    @property
    def is_connected(self) -> bool:
        return self._session is not None

    def session(self) -> Session:
        """Return the live session, establishing it (and the schema) if needed."""
        if self._session is None:
            self._session = self._connect()
        return self._session

    def _connect(self) -> Session:
        url = make_url(self._settings.database_url)
        target = url.render_as_string(hide_password=True)
        with self._log.timed_step(StoreStage.CONNECT, "Establishing database connection", url=target):
            self.bootstrap()
            session = Session(self.engine)
            try:
                # check out the connection now so a dead server fails here
                session.connection()
                session.rollback()
            except SQLAlchemyError as exc:
                session.close()
                raise PersistenceError("Failed to establish database connection", exc) from exc
        return session

    def bootstrap(self) -> None:
        """Create the articles table and its indexes when they are missing.

        Idempotent: safe to run against an already initialized database.
        """
        with self._log.timed_step(StoreStage.SCHEMA, "Ensuring articles schema"):
            try:
                with self.engine.begin() as conn:
                    Base.metadata.create_all(conn, checkfirst=True)
                    # create_all skips indexes of a table that already exists
                    for index in ArticleModel.__table__.indexes:
                        index.create(conn, checkfirst=True)
            except SQLAlchemyError as exc:
                raise PersistenceError("Failed to initialize database schema", exc) from exc

    def test_connection(self) -> bool:
        """Round-trip ``SELECT 1``; False (and a warning) when the database is unreachable."""
        try:
            session = self.session()
            with session.begin():
                session.execute(text("SELECT 1"))
        except (SQLAlchemyError, PersistenceError) as exc:
            logger.warning("Connection test failed: %s", exc)
            return False
        return True

    def close(self) -> None:
        """Release the session and dispose of the engine's pooled connections."""
        if self._session is not None:
            self._session.close()
            self._session = None
            logger.info("Database connection closed.")
        if self._engine is not None and self._owns_engine:
            self._engine.dispose()
            self._engine = None

    def __enter__(self) -> "Database":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
