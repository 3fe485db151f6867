"""Work item database model for Workboard."""

from typing import Any, Dict

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from workboard.c1_database_session.base import Base, generate_id, isoformat, utcnow


class WorkItem(Base):
    """Task, bug or story tracked on a project's board."""

    __tablename__ = "work_items"

    id = Column(String, primary_key=True, default=generate_id)
    project_id = Column(String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    assignee_id = Column(String, ForeignKey("users.id", ondelete="SET NULL"))
    reporter_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    # Core Fields
    title = Column(String(200), nullable=False)
    description = Column(Text, default="")
    type = Column(
        String,
        CheckConstraint("type IN ('task', 'bug', 'story')"),
        nullable=False,
    )
    status = Column(
        String,
        CheckConstraint("status IN ('todo', 'in_progress', 'done')"),
        default="todo",
        nullable=False,
    )
    priority = Column(
        String,
        CheckConstraint("priority IN ('low', 'medium', 'high', 'critical')"),
        default="medium",
        nullable=False,
    )

    # Estimation
    story_points = Column(Integer)
    estimated_hours = Column(Integer)

    # Ordering & concurrency
    priority_order = Column(
        Integer,
        CheckConstraint("priority_order >= 0"),
        default=0,
        nullable=False,
    )
    version = Column(Integer, default=1, nullable=False)

    # Metadata
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    project = relationship("Project", back_populates="work_items")

    __table_args__ = (
        Index("idx_work_items_project_status", "project_id", "status"),
        Index("idx_work_items_project_priority", "project_id", "priority_order"),
        Index("idx_work_items_assignee_id", "assignee_id"),
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description or "",
            "type": self.type,
            "status": self.status,
            "priority": self.priority,
            "projectId": self.project_id,
            "assigneeId": self.assignee_id,
            "reporterId": self.reporter_id,
            "storyPoints": self.story_points,
            "estimatedHours": self.estimated_hours,
            "priorityOrder": self.priority_order,
            "version": self.version,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
