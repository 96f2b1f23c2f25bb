"""Command-line entry point: ``news-agency [menu|serve|stats|seed]``."""

import argparse
import logging

from news_agency.application.services import ArticleService
from news_agency.config import Settings, get_settings
from news_agency.domain.exceptions import PersistenceError
from news_agency.infrastructure.database import Database
from news_agency.infrastructure.database.repositories import SQLAlchemyArticleRepository
from news_agency.infrastructure.database.seed import seed_sample_articles
from news_agency.infrastructure.logging.log_config import setup_logging
from news_agency.presentation.console import ConsoleMenu
from news_agency.presentation.console import formatting

logger = logging.getLogger(__name__)


def _connect(database: Database) -> SQLAlchemyArticleRepository:
    """Open the store's connection; raises PersistenceError when unreachable."""
    session = database.session()
    if not database.test_connection():
        raise PersistenceError("Database connection test failed")
    return SQLAlchemyArticleRepository(session)


def cmd_menu(args: argparse.Namespace, settings: Settings) -> int:
    print("=== News Agency Management System ===")
    print("Initializing database connection...")
    with Database(settings) as database:
        repository = _connect(database)
        if settings.seed_sample_data:
            seed_sample_articles(repository)
        print(formatting.success("Database connection successful!"))
        print("Welcome to the News Agency Management System\n")
        ConsoleMenu(ArticleService(repository)).run()
    return 0


def cmd_stats(args: argparse.Namespace, settings: Settings) -> int:
    with Database(settings) as database:
        service = ArticleService(_connect(database))
        regions, languages = service.get_filter_options()
        print(formatting.statistics_block(service.get_statistics(), regions, languages))
    return 0


def cmd_seed(args: argparse.Namespace, settings: Settings) -> int:
    with Database(settings) as database:
        inserted = seed_sample_articles(_connect(database))
    print(f"Inserted {inserted} sample articles.")
    return 0


def cmd_serve(args: argparse.Namespace, settings: Settings) -> int:
    import uvicorn

    uvicorn.run(
        "news_agency.main:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="news-agency", description="News agency article manager")
    parser.add_argument("--log-level", help="Root log level (DEBUG, INFO, WARNING, ...)")
    sub = parser.add_subparsers(dest="command")

    p_menu = sub.add_parser("menu", help="Interactive article menu (default)")
    p_menu.set_defaults(func=cmd_menu)

    p_stats = sub.add_parser("stats", help="Print article statistics")
    p_stats.set_defaults(func=cmd_stats)

    p_seed = sub.add_parser("seed", help="Insert sample articles into an empty table")
    p_seed.set_defaults(func=cmd_seed)

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", help="Bind address")
    p_serve.add_argument("--port", type=int, help="Bind port")
    p_serve.set_defaults(func=cmd_serve)

    parser.set_defaults(func=cmd_menu)
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings, level_override=args.log_level)
    try:
        return int(args.func(args, settings))
    except PersistenceError as exc:
        # No article operation is possible without the database.
        logger.error("Database initialization error: %s", exc)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
