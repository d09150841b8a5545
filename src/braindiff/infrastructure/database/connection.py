"""Database connection management.

Handles async SQLAlchemy engine creation, pooling and schema lifecycle.
"""
from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.schema import DropSchema
from sqlalchemy.sql.base import Executable

from braindiff.shared.config import settings


# Global engine instance
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Get or create the async database engine.

    Returns:
        AsyncEngine instance
    """
    global _engine

    if _engine is None:
        _engine = create_async_engine(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_timeout=settings.database_pool_timeout,
            echo=settings.database_echo,
            pool_pre_ping=True,
            pool_recycle=3600,
        )

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory.

    Returns:
        Session factory for creating sessions
    """
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    return _session_factory


async def init_database() -> None:
    """Initialize database connection pool.

    Call this at application startup.
    """
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(lambda _: None)


async def close_database() -> None:
    """Close database connections.

    Call this at application shutdown.
    """
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def execute_statement(statement: Executable) -> None:
    """Run a single statement in its own transaction.

    Args:
        statement: DDL or DML statement
    """
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.execute(statement)


def drop_schema_statement(schema_name: str) -> DropSchema:
    """Build ``DROP SCHEMA IF EXISTS "<name>" CASCADE``.

    The name is quoted by the dialect, never interpolated.
    """
    return DropSchema(schema_name, cascade=True, if_exists=True)

