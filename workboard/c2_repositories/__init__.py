"""Repositories: storage access for users, projects and work items."""

from workboard.c2_repositories.user_repository import UserRepository
from workboard.c2_repositories.project_repository import ProjectRepository
from workboard.c2_repositories.work_item_repository import WorkItemRepository

__all__ = ["UserRepository", "ProjectRepository", "WorkItemRepository"]
