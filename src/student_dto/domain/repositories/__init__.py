"""Repository protocols for the domain layer."""

from student_dto.domain.repositories.student_repository import StudentRepository

__all__ = ["StudentRepository"]
