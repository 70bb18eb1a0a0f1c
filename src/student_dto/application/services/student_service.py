"""Student application service.

Exposes stored students as DTOs and persists DTOs back to storage.
All conversion goes through a ``StudentMapper``; storage errors such as
``EntityNotFoundError`` propagate unchanged.
"""

from typing import List, Optional

import structlog

from student_dto.api.mappers.student_mapper import StudentMapper
from student_dto.api.schemas.student import StudentDto
from student_dto.domain.exceptions import require
from student_dto.domain.repositories.student_repository import StudentRepository

logger = structlog.get_logger(__name__)


class StudentService:
    """Application service for reading and writing students as DTOs."""

    def __init__(
        self,
        repository: StudentRepository,
        mapper: Optional[StudentMapper] = None,
    ):
        """Initialize with a storage backend and an optional mapper."""
        self.repository = repository
        self.mapper = mapper or StudentMapper()

    async def get_student(self, student_id: int) -> StudentDto:
        """Fetch a student and return it as a DTO.

        Args:
            student_id: ID of the student to fetch

        Returns:
            StudentDto for the stored student

        Raises:
            InvalidArgumentError: If student_id is None
            EntityNotFoundError: If no student has this ID
        """
        require(student_id, "student_id", "int")
        student = await self.repository.fetch_by_id(student_id)
        logger.debug("Student fetched", student_id=student_id)
        return self.mapper.to_dto(student)

    async def get_students(self, student_ids: List[int]) -> List[StudentDto]:
        """Fetch several students as DTOs; unknown IDs are skipped."""
        require(student_ids, "student_ids")
        students = await self.repository.fetch_many(student_ids)
        return self.mapper.to_dto_list(students)

    async def save_student(self, dto: StudentDto) -> StudentDto:
        """Persist a DTO and return the stored form.

        The returned DTO carries the generated ID when the input had none.

        Raises:
            InvalidArgumentError: If dto is None
            DuplicateEntityError: If the database rejects the write
        """
        entity = self.mapper.to_entity(dto)
        saved = await self.repository.save(entity)

        log = logger.bind(student_id=saved.student_id)
        if dto.student_id is None:
            log.info("Student created")
        else:
            log.info("Student updated")

        return self.mapper.to_dto(saved)
