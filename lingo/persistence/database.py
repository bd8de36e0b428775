"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL, and the
translation of driver failures into domain storage errors.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import logfire
from sqlalchemy.exc import InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from lingo.config import Settings
from lingo.domain.error import StorageError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


@asynccontextmanager
async def storage_errors(
    session: AsyncSession, operation: str
) -> AsyncGenerator[None, None]:
    """Translate connectivity failures inside the block into StorageError.

    The session is rolled back so it can be used again, for example by a
    retried read. Integrity and programming errors are not translated.

    Args:
        session: Session the block runs statements on
        operation: Name used in logs and the raised error

    Raises:
        StorageError: If the database was unreachable or the connection broke
    """
    try:
        yield
    except (OperationalError, InterfaceError) as e:
        logfire.error("Storage operation failed", operation=operation, error=str(e))
        try:
            await session.rollback()
        except SQLAlchemyError as rollback_error:
            logfire.warn(
                "Rollback after storage failure failed",
                operation=operation,
                error=str(rollback_error),
            )
        raise StorageError(operation, str(e)) from e
