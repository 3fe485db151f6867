"""Data access for projects."""

from typing import Any, Dict, List, Optional

from workboard.c1_database_session import DatabaseManager, generate_id, utcnow
from workboard.c1_project_models import Project


class ProjectRepository:
    """SQLAlchemy-backed store for projects."""

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    async def create(self, data: Dict[str, Any]) -> Project:
        now = utcnow()
        project = Project(
            id=generate_id(),
            name=data["name"],
            description=data.get("description") or "",
            owner_id=data["owner_id"],
            status=data.get("status") or "active",
            created_at=now,
            updated_at=now,
        )
        with self.db_manager.session_scope() as db:
            db.add(project)
        return project

    async def find_by_id(self, project_id: str) -> Optional[Project]:
        with self.db_manager.session_scope() as db:
            return db.query(Project).filter_by(id=project_id).first()

    async def find_by_owner_id(self, owner_id: str) -> List[Project]:
        with self.db_manager.session_scope() as db:
            return (
                db.query(Project)
                .filter_by(owner_id=owner_id)
                .order_by(Project.created_at.desc())
                .all()
            )

    async def update(self, project_id: str, changes: Dict[str, Any]) -> Optional[Project]:
        with self.db_manager.session_scope() as db:
            project = db.query(Project).filter_by(id=project_id).first()
            if project is None:
                return None
            for field, value in changes.items():
                setattr(project, field, value)
            if changes:
                project.updated_at = utcnow()
            db.flush()
            return project

    async def delete(self, project_id: str) -> bool:
        """Delete a project. Its work items go with it (ON DELETE CASCADE)."""
        with self.db_manager.session_scope() as db:
            project = db.query(Project).filter_by(id=project_id).first()
            if project is None:
                return False
            db.delete(project)
        return True
