"""
Database engine and session management for async SQLAlchemy.
PostgreSQL is used when DATABASE_URL is set, with a SQLite fallback for dev.
"""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.config import Settings

logger = logging.getLogger(__name__)


def resolve_database_url(settings: Settings) -> str:
    """
    Pick the database URL for the database avatar store.

    Returns:
        The DATABASE_URL when set, otherwise the SQLite fallback URL

    Raises:
        ValueError: If no DATABASE_URL is set and the fallback is disabled
    """
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    if settings.USE_SQLITE_FALLBACK:
        logger.warning(
            f"[DEV MODE] DATABASE_URL not set, using SQLite fallback: {settings.SQLITE_FALLBACK_URL}"
        )
        return settings.SQLITE_FALLBACK_URL
    raise ValueError("DATABASE_URL must be set when USE_SQLITE_FALLBACK is disabled")


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine with settings suited to the database type."""
    if "sqlite" in database_url:
        return create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(
        database_url,
        echo=echo,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
