"""SQLAlchemy database session management.

This module owns the async engine and session factory used by the catalog
repositories. SQLite URLs get foreign key enforcement switched on so join rows
are checked the same way PostgreSQL checks them.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from pokemon_review.core.settings import get_settings


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


# Global engine and session factory
_engine: AsyncEngine | None = None
_async_session_maker: async_sessionmaker[AsyncSession] | None = None


def create_engine(database_url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    """Create an async engine, enabling foreign keys for SQLite."""
    engine = create_async_engine(database_url, echo=echo, **kwargs)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory bound to an engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


def init_db_session() -> None:
    """Initialize the database engine and session factory."""
    global _engine, _async_session_maker

    if _async_session_maker is not None:
        return  # Already initialized

    settings = get_settings()

    if settings.database_url.startswith("sqlite"):
        _engine = create_engine(settings.database_url, echo=settings.debug)
    else:
        _engine = create_engine(
            settings.database_url,
            echo=settings.debug,
            pool_pre_ping=True,
        )
    _async_session_maker = create_session_maker(_engine)


def get_engine() -> AsyncEngine:
    """Get the global engine, initializing it on first use."""
    if _engine is None:
        init_db_session()

    if _engine is None:
        raise RuntimeError("Failed to initialize database engine")

    return _engine


async def close_db_session() -> None:
    """Dispose of the global engine."""
    global _engine, _async_session_maker

    if _engine is not None:
        await _engine.dispose()

    _engine = None
    _async_session_maker = None


async def create_all_tables(engine: AsyncEngine) -> None:
    """Create every table registered on ``Base.metadata``."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session."""
    if _async_session_maker is None:
        init_db_session()

    if _async_session_maker is None:
        raise RuntimeError("Failed to initialize database session")

    async with _async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()
