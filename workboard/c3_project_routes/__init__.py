"""C3 Project Routes - project CRUD."""
from workboard.c3_project_routes.project_routes import create_project_router
__all__ = ["create_project_router"]
