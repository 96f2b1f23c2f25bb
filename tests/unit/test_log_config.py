"""Unit tests for per-category logging setup."""

import logging

import pytest

from news_agency.config import Settings
from news_agency.infrastructure.logging.log_config import setup_logging


@pytest.fixture(autouse=True)
def restore_levels():
    names = ["", "sqlalchemy.engine", "news_agency.infrastructure.database", "uvicorn.access"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_category_levels_come_from_settings():
    settings = Settings(
        _env_file=None,
        log_level="WARNING",
        log_level_sql="ERROR",
        log_level_store="DEBUG",
        log_level_uvicorn="CRITICAL",
    )
    setup_logging(settings)
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("news_agency.infrastructure.database").level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").level == logging.CRITICAL


def test_level_override_only_changes_root():
    settings = Settings(_env_file=None, log_level="WARNING", log_level_sql="ERROR")
    setup_logging(settings, level_override="debug")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR


def test_unknown_level_names_default_to_info():
    setup_logging(Settings(_env_file=None, log_level="LOUD", log_level_store="chatty"))
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("news_agency.infrastructure.database").level == logging.INFO
