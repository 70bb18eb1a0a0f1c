"""SQLAlchemy models.

Importing this package registers every model with ``Base.metadata``.
"""

from student_dto.infrastructure.persistence.models.base import Base
from student_dto.infrastructure.persistence.models.student import Student

__all__ = ["Base", "Student"]
