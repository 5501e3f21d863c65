"""Stdlib logging for libraries that don't report through Logfire."""

import logging
import sys

from inkwell.config import Settings

FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Library loggers pinned regardless of the application level
QUIET_LOGGERS = ("asyncpg", "uvicorn.access")


def log_level(settings: Settings) -> int:
    """Application log level for the configured environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging to stdout at the environment's level.

    SQL echo follows ``debug``; Alembic always reports the migrations it
    runs.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(level=level, format=FORMAT, stream=sys.stdout, force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    logging.getLogger("alembic").setLevel(logging.INFO)

    logging.getLogger("inkwell").info(
        "Logging configured (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )
