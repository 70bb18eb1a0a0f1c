"""Student transfer schemas.

``StudentDto`` is the externally exposed representation of a student.
It carries the same four fields as the persistence model but holds no
reference to it; every conversion produces a fresh value copy.
"""

from typing import Optional

from pydantic import BaseModel, Field

from student_dto.domain.exceptions import require
from student_dto.infrastructure.persistence.models.student import Student


class StudentDto(BaseModel):
    """Data transfer object for a student."""

    student_id: Optional[int] = Field(
        None, description="Unique identifier for the student", examples=[123]
    )

    first_name: Optional[str] = Field(
        None, description="Student's given name", examples=["Euni"]
    )

    last_name: Optional[str] = Field(
        None, description="Student's family name", examples=["Wyan"]
    )

    year: Optional[int] = Field(None, description="Enrollment year", examples=[2018])

    # Conversion using an alternate constructor
    @classmethod
    def from_entity(cls, entity: Student) -> "StudentDto":
        """Create a DTO from a Student persistence model."""
        require(entity, "entity", "Student")
        return cls(
            student_id=entity.student_id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            year=entity.year,
        )

    # Conversion using a method
    def to_entity(self) -> Student:
        """Convert this DTO to a new, transient Student model."""
        entity = Student()

        entity.student_id = self.student_id
        entity.first_name = self.first_name
        entity.last_name = self.last_name
        entity.year = self.year

        return entity
