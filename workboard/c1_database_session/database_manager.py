"""Database manager and session utilities for Workboard."""

import logging
import os
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from workboard.c1_database_session.base import Base

logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """Manager for database operations."""

    def __init__(self, database_path: str = "data/workboard.db", echo: bool = False):
        """Initialize database connection."""
        self.database_path = database_path
        if database_path != ":memory:":
            directory = os.path.dirname(database_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

        self.engine = create_engine(
            f"sqlite:///{database_path}",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=echo,
        )
        event.listen(self.engine, "connect", _enable_foreign_keys)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )

    def create_tables(self):
        """Create all database tables."""
        # Model modules register themselves on Base.metadata when imported
        import workboard.c1_user_models.user  # noqa: F401
        import workboard.c1_project_models.project  # noqa: F401
        import workboard.c1_work_item_models.work_item  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Database tables ready at {self.database_path}")

    def drop_tables(self):
        """Drop all database tables (for testing)."""
        Base.metadata.drop_all(bind=self.engine)

    def get_session(self) -> Session:
        """Get a database session."""
        return self.SessionLocal()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Provide a transactional scope around a series of operations."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def dispose(self):
        """Release pooled connections."""
        self.engine.dispose()
