"""Tests for database engine and session management."""

import pytest
from sqlalchemy import text

from student_dto.core import database
from student_dto.core.config import Settings
from student_dto.infrastructure.persistence.models.student import Student


@pytest.fixture
async def file_database(tmp_path):
    """Point the lazy engine at a temporary SQLite file."""
    await database.close_db()
    settings = Settings(
        _env_file=None, database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    )
    database.get_engine(settings)
    await database.init_db()

    yield settings

    await database.close_db()


class TestDatabase:
    """Test engine lifecycle and session scopes."""

    async def test_engine_is_reused(self, file_database):
        """Test the engine is created once."""
        assert database.get_engine() is database.get_engine()

    async def test_init_db_creates_tables(self, file_database):
        """Test the students table exists after init."""
        async with database.get_db_context() as session:
            result = await session.execute(text("SELECT COUNT(*) FROM students"))
            assert result.scalar() == 0

    async def test_context_commits(self, file_database):
        """Test a successful scope commits its work."""
        async with database.get_db_context() as session:
            session.add(Student(student_id=1, first_name="Euni"))

        async with database.get_db_context() as session:
            assert (await session.get(Student, 1)).first_name == "Euni"

    async def test_context_rolls_back_on_error(self, file_database):
        """Test a failing scope discards its work and re-raises."""
        with pytest.raises(RuntimeError):
            async with database.get_db_context() as session:
                session.add(Student(student_id=2, first_name="Lost"))
                await session.flush()
                raise RuntimeError("boom")

        async with database.get_db_context() as session:
            assert await session.get(Student, 2) is None

    async def test_get_db_generator(self, file_database):
        """Test the generator form commits when exhausted."""
        generator = database.get_db()
        session = await generator.__anext__()
        session.add(Student(student_id=3, first_name="Gen"))
        with pytest.raises(StopAsyncIteration):
            await generator.__anext__()

        async with database.get_db_context() as session:
            assert await session.get(Student, 3) is not None

    async def test_close_db_resets_state(self, file_database):
        """Test closing forgets the engine and session factory."""
        await database.close_db()

        assert database.engine is None
        assert database.async_session is None
