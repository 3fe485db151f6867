"""Database session management for Workboard."""

from workboard.c1_database_session.base import Base, generate_id, isoformat, utcnow
from workboard.c1_database_session.database_manager import DatabaseManager

__all__ = ["Base", "DatabaseManager", "generate_id", "isoformat", "utcnow"]
