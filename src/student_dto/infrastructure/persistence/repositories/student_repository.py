"""Student repository implementation."""

from typing import List

import structlog
from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from student_dto.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from student_dto.infrastructure.persistence.models.student import Student

logger = structlog.get_logger(__name__)


class SQLAlchemyStudentRepository:
    """SQLAlchemy implementation of the student repository.

    The repository flushes but never commits; the transaction boundary
    belongs to whoever owns the session.
    """

    def __init__(self, session: AsyncSession):
        """Initialize with database session."""
        self.session = session

    async def fetch_by_id(self, student_id: int) -> Student:
        """Get student by ID."""
        student = await self.session.get(Student, student_id)
        if student is None:
            raise EntityNotFoundError("Student", student_id)
        return student

    async def fetch_many(self, student_ids: List[int]) -> List[Student]:
        """Get multiple students by IDs, ordered by ID."""
        if not student_ids:
            return []

        stmt = (
            select(Student)
            .where(Student.student_id.in_(student_ids))
            .order_by(Student.student_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def save(self, student: Student) -> Student:
        """Save student (create or update).

        A student without an ID is inserted and receives a generated one;
        a student with an ID is merged into the session.
        """
        student_id = student.student_id
        try:
            if student_id is None:
                self.session.add(student)
            else:
                student = await self.session.merge(student)

            await self.session.flush()
            await self.session.refresh(student)

        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(
                "Student save rejected by database",
                student_id=student_id,
                error=str(e.orig),
            )
            raise DuplicateEntityError(
                entity_type="Student",
                duplicate_field="student_id",
                duplicate_value=student_id,
            ) from e

        logger.debug("Student saved", student_id=student.student_id)
        return student

    async def delete(self, student_id: int) -> bool:
        """Delete student by ID."""
        student = await self.session.get(Student, student_id)
        if student is None:
            return False

        await self.session.delete(student)
        await self.session.flush()
        return True

    async def exists(self, student_id: int) -> bool:
        """Check if student exists."""
        stmt = select(exists().where(Student.student_id == student_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())
