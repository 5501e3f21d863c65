"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from inkwell.config import Settings
from inkwell.util.error import ConfigurationError

ASYNC_DRIVER_PREFIX = "postgresql+asyncpg://"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine

    Raises:
        ConfigurationError: If the URL does not use the asyncpg driver
    """
    if not settings.database_url.startswith(ASYNC_DRIVER_PREFIX):
        raise ConfigurationError(
            "DATABASE__URL", f"expected a {ASYNC_DRIVER_PREFIX} URL"
        )

    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions for Core statements; rows are mapped to domain models by hand."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
