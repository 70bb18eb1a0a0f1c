"""Database connection and session management.

This module provides async database session management using SQLAlchemy 2.0
with lazy engine creation and transaction handling.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from student_dto.core.config import Settings, get_settings

logger = structlog.get_logger(__name__)

# Global variables for lazy initialization
engine: Optional[AsyncEngine] = None
async_session: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine(settings: Optional[Settings] = None) -> AsyncEngine:
    """Get or create the database engine."""
    global engine
    if engine is None:
        settings = settings or get_settings()
        kwargs = {"echo": settings.database_echo, "future": True}

        # SQLite pools do not accept sizing arguments
        if not settings.is_sqlite:
            kwargs.update(
                pool_size=settings.database_pool_size,
                max_overflow=settings.database_max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )

        engine = create_async_engine(settings.database_url, **kwargs)
        logger.debug("Database engine created", url=engine.url.render_as_string())
    return engine


def get_session_factory(
    settings: Optional[Settings] = None,
) -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory."""
    global async_session
    if async_session is None:
        async_session = async_sessionmaker(
            get_engine(settings),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return async_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session that commits on success.

    Yields:
        AsyncSession: Database session for the unit of work
    """
    session_factory = get_session_factory()
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """Context manager for a database session.

    Yields:
        AsyncSession: Database session

    Example:
        async with get_db_context() as db:
            repository = SQLAlchemyStudentRepository(db)
            student = await repository.fetch_by_id(123)
    """
    session_factory = get_session_factory()
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create all tables that do not exist yet."""
    from student_dto.infrastructure.persistence.models import Base

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized")


async def close_db() -> None:
    """Dispose of the engine and forget the session factory."""
    global engine, async_session
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    async_session = None
