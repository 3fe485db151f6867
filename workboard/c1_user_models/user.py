"""User account database model for Workboard."""

from typing import Any, Dict

from sqlalchemy import CheckConstraint, Column, DateTime, Index, String, Text
from sqlalchemy.orm import relationship

from workboard.c1_database_session.base import Base, generate_id, isoformat, utcnow


class User(Base):
    """Registered user. Owns projects and reports work items."""

    __tablename__ = "users"

    id = Column(String, primary_key=True, default=generate_id)
    email = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    password_hash = Column(Text, nullable=False)
    role = Column(
        String,
        CheckConstraint("role IN ('admin', 'manager', 'developer')"),
        nullable=False,
    )
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    projects = relationship("Project", back_populates="owner", cascade="all, delete-orphan")

    __table_args__ = (Index("idx_users_role", "role"),)

    def to_dict(self) -> Dict[str, Any]:
        """Public representation; never includes the password hash."""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
