"""Work item routes for Workboard."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from workboard.c1_user_models import User
from workboard.c3_api_common import (
    create_current_user_dependency,
    expected_version_header,
    success_response,
    version_headers,
)

logger = logging.getLogger(__name__)


# Request Models
class CreateWorkItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., description="Work item title")
    description: Optional[str] = Field(None, description="Detailed description")
    type: str = Field(..., description="Type: task, bug, story")
    priority: Optional[str] = Field(None, description="Priority: low, medium, high, critical")
    assignee_id: Optional[str] = Field(None, alias="assigneeId", description="User to assign")
    story_points: Optional[int] = Field(None, alias="storyPoints", description="1-100")
    estimated_hours: Optional[int] = Field(None, alias="estimatedHours", description="1-1000")


class UpdateWorkItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: Optional[str] = Field(None, description="New title")
    description: Optional[str] = Field(None, description="New description")
    type: Optional[str] = Field(None, description="New type")
    status: Optional[str] = Field(None, description="New status (transition rules apply)")
    priority: Optional[str] = Field(None, description="New priority label")
    assignee_id: Optional[str] = Field(None, alias="assigneeId", description="New assignee, null to clear")
    story_points: Optional[int] = Field(None, alias="storyPoints", description="1-100")
    estimated_hours: Optional[int] = Field(None, alias="estimatedHours", description="1-1000")


class UpdateStatusRequest(BaseModel):
    status: str = Field(..., description="Target status: todo, in_progress, done")


class AssignWorkItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    assignee_id: str = Field(..., alias="assigneeId", description="User to assign")


def create_work_item_router(app_state):
    """Create work item router.

    Args:
        app_state: AppState instance with work_item_service and auth_service

    Returns:
        APIRouter: Router with project item and /items endpoints
    """
    router = APIRouter(tags=["work-items"])
    get_current_user = create_current_user_dependency(app_state)

    @router.get("/projects/{project_id}/items")
    async def list_project_work_items(
        project_id: str,
        status: Optional[str] = Query(None, description="Filter by status"),
        type: Optional[str] = Query(None, description="Filter by type"),
        priority: Optional[str] = Query(None, description="Filter by priority"),
        assignee_id: Optional[str] = Query(None, alias="assigneeId", description="Filter by assignee"),
        current_user: User = Depends(get_current_user),
    ):
        work_items = await app_state.work_item_service.get_project_work_items(
            project_id,
            current_user.id,
            filters={
                "status": status,
                "type": type,
                "priority": priority,
                "assignee_id": assignee_id,
            },
        )
        return success_response(
            {"workItems": [item.to_dict() for item in work_items]},
            "Work items retrieved successfully",
        )

    @router.post("/projects/{project_id}/items", status_code=201)
    async def create_work_item(
        project_id: str,
        request: CreateWorkItemRequest,
        current_user: User = Depends(get_current_user),
    ):
        work_item = await app_state.work_item_service.create_work_item(
            request.model_dump(), project_id, current_user.id
        )
        return success_response(
            {"workItem": work_item.to_dict()},
            "Work item created successfully",
            status_code=201,
            headers=version_headers(work_item),
        )

    @router.get("/items/{work_item_id}")
    async def get_work_item(work_item_id: str, current_user: User = Depends(get_current_user)):
        work_item = await app_state.work_item_service.get_work_item(work_item_id, current_user.id)
        return success_response(
            {"workItem": work_item.to_dict()},
            "Work item retrieved successfully",
            headers=version_headers(work_item),
        )

    @router.put("/items/{work_item_id}")
    async def update_work_item(
        work_item_id: str,
        request: UpdateWorkItemRequest,
        expected_version: Optional[int] = Depends(expected_version_header),
        current_user: User = Depends(get_current_user),
    ):
        work_item = await app_state.work_item_service.update_work_item(
            work_item_id,
            request.model_dump(exclude_unset=True),
            current_user.id,
            expected_version=expected_version,
        )
        return success_response(
            {"workItem": work_item.to_dict()},
            "Work item updated successfully",
            headers=version_headers(work_item),
        )

    @router.delete("/items/{work_item_id}")
    async def delete_work_item(work_item_id: str, current_user: User = Depends(get_current_user)):
        await app_state.work_item_service.delete_work_item(work_item_id, current_user.id)
        return success_response(None, "Work item deleted successfully")

    @router.patch("/items/{work_item_id}/status")
    async def update_work_item_status(
        work_item_id: str,
        request: UpdateStatusRequest,
        expected_version: Optional[int] = Depends(expected_version_header),
        current_user: User = Depends(get_current_user),
    ):
        work_item = await app_state.work_item_service.update_work_item_status(
            work_item_id, request.status, current_user.id, expected_version=expected_version
        )
        return success_response(
            {"workItem": work_item.to_dict()},
            "Work item status updated successfully",
            headers=version_headers(work_item),
        )

    @router.patch("/items/{work_item_id}/assignee")
    async def assign_work_item(
        work_item_id: str,
        request: AssignWorkItemRequest,
        expected_version: Optional[int] = Depends(expected_version_header),
        current_user: User = Depends(get_current_user),
    ):
        work_item = await app_state.work_item_service.assign_work_item(
            work_item_id, request.assignee_id, current_user.id, expected_version=expected_version
        )
        return success_response(
            {"workItem": work_item.to_dict()},
            "Work item assigned successfully",
            headers=version_headers(work_item),
        )

    return router
