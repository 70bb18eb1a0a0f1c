"""Student model for persistent student records.

This is the storage-facing representation of a student. It is owned by
the database session; API code works with ``StudentDto`` instead.
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from student_dto.infrastructure.persistence.models.base import Base


class Student(Base):
    """Student model representing an enrolled student.

    Attributes:
        student_id: Unique identifier, generated on insert when absent
        first_name: Student's given name
        last_name: Student's family name
        year: Enrollment year
    """

    __tablename__ = "students"

    student_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Unique identifier for the student",
    )

    first_name: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="Student's given name"
    )

    last_name: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="Student's family name"
    )

    year: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True, comment="Enrollment year"
    )

    def __repr__(self) -> str:
        """String representation of the student."""
        return (
            f"<Student(student_id={self.student_id}, "
            f"first_name='{self.first_name}', last_name='{self.last_name}', "
            f"year={self.year})>"
        )
