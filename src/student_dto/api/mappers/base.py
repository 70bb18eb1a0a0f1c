"""Base mapper protocol for API DTOs and persistence entities."""

from typing import Callable, List, Protocol, TypeVar, runtime_checkable

# Type variables for DTOs and entities
TDto = TypeVar("TDto")  # API DTO (Pydantic model)
TEntity = TypeVar("TEntity")  # Persistence entity (SQLAlchemy model)

T = TypeVar("T")
U = TypeVar("U")


@runtime_checkable
class APIMapper(Protocol[TDto, TEntity]):
    """Protocol for mapping between API DTOs and persistence entities.

    Neither side knows about the other; the mapper is the only place
    where their field correspondence is written down. Uses Protocol for
    structural subtyping instead of ABC.
    """

    def to_dto(self, entity: TEntity) -> TDto:
        """Convert entity to API DTO.

        Args:
            entity: Persistence entity

        Returns:
            API data transfer object (Pydantic model)
        """
        ...

    def to_entity(self, dto: TDto) -> TEntity:
        """Convert API DTO to entity.

        Args:
            dto: API data transfer object (Pydantic model)

        Returns:
            New, transient persistence entity
        """
        ...


def map_collection(items: List[T], mapper: Callable[[T], U]) -> List[U]:
    """Map a collection of items using the provided mapper function."""
    return [mapper(item) for item in items]
