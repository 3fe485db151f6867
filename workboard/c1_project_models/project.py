"""Project database model for Workboard."""

from typing import Any, Dict

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship

from workboard.c1_database_session.base import Base, generate_id, isoformat, utcnow


class Project(Base):
    """Project owned by a single user; container for work items."""

    __tablename__ = "projects"

    id = Column(String, primary_key=True, default=generate_id)
    name = Column(String(200), nullable=False)
    description = Column(Text, default="")
    owner_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    status = Column(
        String,
        CheckConstraint("status IN ('active', 'archived', 'completed')"),
        default="active",
        nullable=False,
    )
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    owner = relationship("User", back_populates="projects")
    work_items = relationship(
        "WorkItem",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_projects_owner_id", "owner_id"),
        Index("idx_projects_status", "status"),
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description or "",
            "ownerId": self.owner_id,
            "status": self.status,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
