"""Domain-specific exceptions.

These exceptions represent the error conditions that can occur while
mapping and persisting students. None of them are handled inside the
mappers; they propagate to the caller unchanged.

Following Pythonic principles:
- Rich exception messages with context
- Using dataclasses for structured error data
- Leveraging Python's exception chaining
- Simple, flat hierarchy
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class ErrorContext:
    """Structured error context using dataclass."""

    entity_type: Optional[str] = None
    entity_id: Optional[Any] = None
    field_name: Optional[str] = None
    invalid_value: Optional[Any] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        result = {}
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        if self.field_name:
            result["field_name"] = self.field_name
        if self.invalid_value is not None:
            result["invalid_value"] = self.invalid_value
        if self.extra:
            result.update(self.extra)
        return result


class DomainException(Exception):
    """Base exception for all domain-specific errors.

    Provides rich context about what went wrong and where.
    """

    def __init__(
        self,
        message: str,
        *,  # Force keyword-only arguments
        context: ErrorContext,
    ):
        """Initialize domain exception with rich context.

        Args:
            message: Human-readable error message
            context: Structured error context
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Provide detailed string representation."""
        parts = [self.message]

        if self.context.entity_type:
            if self.context.entity_id is not None:
                parts.append(f"[{self.context.entity_type}:{self.context.entity_id}]")
            else:
                parts.append(f"[{self.context.entity_type}]")

        if self.context.field_name:
            parts.append(f"Field: {self.context.field_name}")

        if self.context.invalid_value is not None:
            parts.append(f"Invalid value: {self.context.invalid_value!r}")

        return " - ".join(parts)

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"context={self.context!r})"
        )


class InvalidArgumentError(DomainException):
    """Raised when a required argument is absent.

    Mapping calls raise this for ``None`` input instead of producing
    a half-populated record.
    """

    def __init__(
        self,
        argument: str,
        expected_type: Optional[str] = None,
        message: Optional[str] = None,
    ):
        """Initialize with the name of the offending argument."""
        if message is None:
            message = f"Argument '{argument}' must not be None"
            if expected_type:
                message = f"{message}; expected {expected_type}"

        context = ErrorContext(entity_type=expected_type, field_name=argument)

        super().__init__(message, context=context)


class EntityNotFoundError(DomainException):
    """Raised when an entity cannot be found.

    This is used when repository lookups fail.
    """

    def __init__(self, entity_type: str, entity_id: Any, message: Optional[str] = None):
        """Initialize with entity information."""
        message = message or f"{entity_type} with ID {entity_id!r} not found"

        context = ErrorContext(entity_type=entity_type, entity_id=entity_id)

        super().__init__(message, context=context)


class DuplicateEntityError(DomainException):
    """Raised when the database rejects a write as a duplicate.

    This protects uniqueness constraints.
    """

    def __init__(self, entity_type: str, duplicate_field: str, duplicate_value: Any):
        """Initialize with duplication information."""
        message = (
            f"{entity_type} with {duplicate_field}={duplicate_value!r} already exists"
        )

        context = ErrorContext(
            entity_type=entity_type,
            field_name=duplicate_field,
            invalid_value=duplicate_value,
        )

        super().__init__(message, context=context)


def require(value: Any, argument: str, expected_type: Optional[str] = None) -> Any:
    """Return ``value`` unchanged, raising InvalidArgumentError if it is None."""
    if value is None:
        raise InvalidArgumentError(argument, expected_type)
    return value
