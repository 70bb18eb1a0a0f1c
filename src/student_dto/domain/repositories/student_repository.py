"""Student repository protocol."""

from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from student_dto.infrastructure.persistence.models.student import Student


@runtime_checkable
class StudentRepository(Protocol):
    """Repository protocol for Student records.

    This is the storage capability the application needs. Lookups that
    cannot be resolved raise ``EntityNotFoundError``.
    """

    async def fetch_by_id(self, student_id: int) -> "Student":
        """Get student by ID."""
        ...

    async def fetch_many(self, student_ids: List[int]) -> List["Student"]:
        """Get multiple students by IDs."""
        ...

    async def save(self, student: "Student") -> "Student":
        """Save student (create or update) and return the persisted form."""
        ...

    async def delete(self, student_id: int) -> bool:
        """Delete student by ID."""
        ...

    async def exists(self, student_id: int) -> bool:
        """Check if student exists."""
        ...
