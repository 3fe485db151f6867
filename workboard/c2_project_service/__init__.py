"""C2 Project Service - project ownership and access checks."""
from workboard.c2_project_service.project_service import ProjectService
__all__ = ["ProjectService"]
