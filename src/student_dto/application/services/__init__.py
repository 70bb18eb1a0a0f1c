"""Application services."""

from student_dto.application.services.student_service import StudentService

__all__ = ["StudentService"]
