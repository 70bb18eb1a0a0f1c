"""Base model class for all database models.

This module provides the base declarative class for all SQLAlchemy
models in the application.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all database models.

    Provides common configuration and type annotation support
    for SQLAlchemy 2.0+ models.
    """

    # Allow any unmapped attributes (for type hints, etc.)
    __allow_unmapped__ = True
