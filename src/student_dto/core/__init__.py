"""Core configuration, logging and database session management."""
