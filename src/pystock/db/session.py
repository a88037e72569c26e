import logging
from typing import Any, AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.exceptions import DatabaseUnavailableError
from ..core.settings import Settings

_logger = logging.getLogger(__name__)


def createEngine(settings: Settings) -> AsyncEngine:
    """Build the process-wide engine and its bounded connection pool."""
    return create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DB_ECHO,
        poolclass=AsyncAdaptedQueuePool,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
    )


def createSessionMaker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """
    Check connectivity and create missing tables.

    Runs once at startup. Any failure here is raised as
    DatabaseUnavailableError so the application refuses to start.
    """
    # Make sure every table model is registered on the metadata
    from .. import models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            await conn.run_sync(SQLModel.metadata.create_all)
    except (SQLAlchemyError, OSError) as e:
        raise DatabaseUnavailableError(f"Unable to reach database: {e}") from e
    _logger.debug("Tables ensured: %s", ", ".join(SQLModel.metadata.tables))


async def get_session(request: Request) -> AsyncGenerator[Any, Any]:
    async with request.app.state.session_maker() as session:
        yield session
