"""Student mapper for entity to DTO conversion."""

from typing import List

from student_dto.api.mappers.base import map_collection
from student_dto.api.schemas.student import StudentDto
from student_dto.domain.exceptions import require
from student_dto.infrastructure.persistence.models.student import Student


class StudentMapper:
    """Maps between the Student persistence model and StudentDto.

    Stateless; a single instance can be shared freely.
    """

    def to_dto(self, entity: Student) -> StudentDto:
        """Convert Student persistence model to DTO."""
        require(entity, "entity", "Student")

        return StudentDto(
            student_id=entity.student_id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            year=entity.year,
        )

    def to_entity(self, dto: StudentDto) -> Student:
        """Convert DTO to a new, transient Student persistence model."""
        require(dto, "dto", "StudentDto")

        entity = Student()
        entity.student_id = dto.student_id
        entity.first_name = dto.first_name
        entity.last_name = dto.last_name
        entity.year = dto.year

        return entity

    def to_dto_list(self, entities: List[Student]) -> List[StudentDto]:
        """Convert list of Student models to DTOs."""
        require(entities, "entities")
        return map_collection(entities, self.to_dto)

    def to_entity_list(self, dtos: List[StudentDto]) -> List[Student]:
        """Convert list of DTOs to Student models."""
        require(dtos, "dtos")
        return map_collection(dtos, self.to_entity)


_mapper = StudentMapper()


def student_to_dto(entity: Student) -> StudentDto:
    """Convert Student persistence model to DTO."""
    return _mapper.to_dto(entity)


def dto_to_student(dto: StudentDto) -> Student:
    """Convert DTO to Student persistence model."""
    return _mapper.to_entity(dto)
