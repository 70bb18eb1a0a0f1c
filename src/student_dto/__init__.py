"""Student entity and DTO mapping service."""

__version__ = "1.0.0"
