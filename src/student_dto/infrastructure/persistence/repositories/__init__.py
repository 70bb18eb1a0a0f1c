"""SQLAlchemy repository implementations."""

from student_dto.infrastructure.persistence.repositories.student_repository import (
    SQLAlchemyStudentRepository,
)

__all__ = ["SQLAlchemyStudentRepository"]
