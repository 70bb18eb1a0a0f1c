"""API mappers for converting between DTOs and persistence entities."""

from student_dto.api.mappers.base import APIMapper, map_collection
from student_dto.api.mappers.student_mapper import (
    StudentMapper,
    dto_to_student,
    student_to_dto,
)

__all__ = [
    "APIMapper",
    "StudentMapper",
    "dto_to_student",
    "map_collection",
    "student_to_dto",
]
