"""Project management routes for Workboard."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from workboard.c1_user_models import User
from workboard.c3_api_common import create_current_user_dependency, success_response

logger = logging.getLogger(__name__)


class CreateProjectRequest(BaseModel):
    name: str = Field(..., description="Project name")
    description: Optional[str] = Field(None, description="Project description")


class UpdateProjectRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, description="New project name")
    description: Optional[str] = Field(None, description="New description")
    status: Optional[str] = Field(None, description="Status: active, archived, completed")


def create_project_router(app_state):
    """Create project router.

    Args:
        app_state: AppState instance with project_service and auth_service

    Returns:
        APIRouter: Router with /projects endpoints
    """
    router = APIRouter(prefix="/projects", tags=["projects"])
    get_current_user = create_current_user_dependency(app_state)

    @router.get("")
    async def list_projects(current_user: User = Depends(get_current_user)):
        projects = await app_state.project_service.list_user_projects(current_user.id)
        return success_response(
            {"projects": [project.to_dict() for project in projects]},
            "Projects retrieved successfully",
        )

    @router.post("", status_code=201)
    async def create_project(
        request: CreateProjectRequest,
        current_user: User = Depends(get_current_user),
    ):
        project = await app_state.project_service.create_project(
            request.model_dump(), current_user.id
        )
        return success_response(
            {"project": project.to_dict()}, "Project created successfully", status_code=201
        )

    @router.get("/{project_id}")
    async def get_project(project_id: str, current_user: User = Depends(get_current_user)):
        project = await app_state.project_service.get_project(project_id, current_user.id)
        return success_response({"project": project.to_dict()}, "Project retrieved successfully")

    @router.put("/{project_id}")
    async def update_project(
        project_id: str,
        request: UpdateProjectRequest,
        current_user: User = Depends(get_current_user),
    ):
        project = await app_state.project_service.update_project(
            project_id, request.model_dump(exclude_unset=True), current_user.id
        )
        return success_response({"project": project.to_dict()}, "Project updated successfully")

    @router.delete("/{project_id}")
    async def delete_project(project_id: str, current_user: User = Depends(get_current_user)):
        await app_state.project_service.delete_project(project_id, current_user.id)
        return success_response(None, "Project deleted successfully")

    return router
