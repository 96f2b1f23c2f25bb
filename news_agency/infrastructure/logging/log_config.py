"""Logging setup for the CLI, the console menu and the API.

Each noisy subsystem (SQL echo, the article store, uvicorn) gets its own
level from Settings, so ``LOG_LEVEL_SQL=DEBUG`` shows statements without
turning the whole application up.

    from news_agency.infrastructure.logging.log_config import setup_logging
    setup_logging(settings, level_override=args.log_level)
"""

import logging
import sys

from news_agency.config import Settings, get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"

# Settings field → logger names it controls.
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool"),
    "log_level_store": ("news_agency.infrastructure.database",),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
}


def setup_logging(settings: Settings | None = None, level_override: str | None = None) -> None:
    """Apply the root level and every per-category level from ``settings``.

    ``level_override`` (``--log-level``) replaces the root level only.
    Safe to call more than once.
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(level_override or settings.log_level))
    # uvicorn brings its own handlers; the CLI does not
    if not root.handlers:
        _install_stderr_handler(root)

    applied: dict[str, str] = {}
    for field_name, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
        applied[field_name] = logging.getLevelName(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        logging.getLevelName(root.level),
        " ".join(f"{field}={level}" for field, level in applied.items()),
    )


def _install_stderr_handler(root: logging.Logger) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    root.addHandler(handler)


def _parse_level(raw: str) -> int:
    """Level name → logging constant; unknown names mean INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
