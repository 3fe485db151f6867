"""Service layer for projects."""

import logging
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError

from workboard.c1_project_models import Project
from workboard.c1_work_item_enums import ProjectStatus
from workboard.c2_repositories import ProjectRepository
from workboard.core.errors import (
    ForbiddenError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000


def _validate_name(name: Any, message: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(message)
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(f"Project name must be less than {NAME_MAX_LENGTH} characters")


def _validate_description(description: Any) -> None:
    if description is None:
        return
    if not isinstance(description, str) or len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Project description must be less than {DESCRIPTION_MAX_LENGTH} characters"
        )


class ProjectService:
    """Project CRUD plus the ownership check other services rely on."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    async def create_project(self, data: Dict[str, Any], user_id: str) -> Project:
        _validate_name(data.get("name"), "Project name is required")
        if not user_id:
            raise ValidationError("User ID is required")
        _validate_description(data.get("description"))

        try:
            project = await self.project_repository.create(
                {
                    "name": data["name"],
                    "description": data.get("description"),
                    "owner_id": user_id,
                }
            )
        except SQLAlchemyError as e:
            logger.error(f"[PROJECT_SERVICE] Failed to create project: {e}", exc_info=True)
            raise PersistenceError("Failed to create project") from e

        logger.info(f"[PROJECT_SERVICE] Created project {project.id} for user {user_id}")
        return project

    async def get_project(self, project_id: str, user_id: str) -> Project:
        """
        Load a project the caller owns.

        Raises:
            ValidationError: If an id is blank
            NotFoundError: If the project does not exist
            ForbiddenError: If the caller is not the owner
        """
        if not project_id:
            raise ValidationError("Project ID is required")
        if not user_id:
            raise ValidationError("User ID is required")

        try:
            project = await self.project_repository.find_by_id(project_id)
        except SQLAlchemyError as e:
            logger.error(f"[PROJECT_SERVICE] Failed to load project {project_id}: {e}", exc_info=True)
            raise PersistenceError("Failed to retrieve project") from e

        if project is None:
            raise NotFoundError("Project")
        if project.owner_id != user_id:
            raise ForbiddenError("You do not have access to this project")
        return project

    async def update_project(self, project_id: str, data: Dict[str, Any], user_id: str) -> Project:
        await self.get_project(project_id, user_id)

        unknown = set(data) - {"name", "description", "status"}
        if unknown:
            raise ValidationError(f"Field(s) cannot be updated: {', '.join(sorted(unknown))}")
        if "name" in data:
            _validate_name(data["name"], "Project name cannot be empty")
        if "description" in data:
            _validate_description(data["description"])
        if "status" in data and data["status"] not in ProjectStatus.values():
            raise ValidationError("Invalid project status")

        try:
            project = await self.project_repository.update(project_id, data)
        except SQLAlchemyError as e:
            logger.error(f"[PROJECT_SERVICE] Failed to update project {project_id}: {e}", exc_info=True)
            raise PersistenceError("Failed to update project") from e
        if project is None:
            raise NotFoundError("Project")
        return project

    async def delete_project(self, project_id: str, user_id: str) -> None:
        """Delete a project and, by cascade, all of its work items."""
        await self.get_project(project_id, user_id)

        try:
            deleted = await self.project_repository.delete(project_id)
        except SQLAlchemyError as e:
            logger.error(f"[PROJECT_SERVICE] Failed to delete project {project_id}: {e}", exc_info=True)
            raise PersistenceError("Failed to delete project") from e
        if not deleted:
            raise NotFoundError("Project")
        logger.info(f"[PROJECT_SERVICE] Deleted project {project_id}")

    async def list_user_projects(self, user_id: str) -> List[Project]:
        if not user_id:
            raise ValidationError("User ID is required")
        try:
            return await self.project_repository.find_by_owner_id(user_id)
        except SQLAlchemyError as e:
            logger.error(f"[PROJECT_SERVICE] Failed to list projects: {e}", exc_info=True)
            raise PersistenceError("Failed to retrieve user projects") from e

    async def validate_project_access(self, project_id: str, user_id: str) -> bool:
        """
        Whether the user may act on the project.

        Only the owner has access. Never raises: unknown projects, blank ids and
        storage failures all answer False.
        """
        if not project_id or not user_id:
            return False

        try:
            project = await self.project_repository.find_by_id(project_id)
        except SQLAlchemyError as e:
            logger.error(f"[PROJECT_SERVICE] Access check failed for {project_id}: {e}")
            return False

        if project is None:
            return False
        return project.owner_id == user_id
