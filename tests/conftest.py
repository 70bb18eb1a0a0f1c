"""Pytest configuration and fixtures."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from student_dto.api.mappers import StudentMapper
from student_dto.infrastructure.persistence.models import Base
from student_dto.infrastructure.persistence.repositories import (
    SQLAlchemyStudentRepository,
)


@pytest.fixture
async def engine():
    """Create test database engine."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def session(engine) -> AsyncSession:
    """Create test session."""
    async_session = async_sessionmaker(engine, expire_on_commit=False)

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def repository(session: AsyncSession) -> SQLAlchemyStudentRepository:
    """Student repository bound to the test session."""
    return SQLAlchemyStudentRepository(session)


@pytest.fixture
def mapper() -> StudentMapper:
    """Shared stateless mapper."""
    return StudentMapper()
