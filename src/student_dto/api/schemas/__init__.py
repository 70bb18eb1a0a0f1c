"""Pydantic schemas exposed by the API layer."""

from student_dto.api.schemas.student import StudentDto

__all__ = ["StudentDto"]
