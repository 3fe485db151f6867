"""Kanban board and backlog routes for Workboard."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from workboard.c1_user_models import User
from workboard.c3_api_common import (
    create_current_user_dependency,
    expected_version_header,
    success_response,
    version_headers,
)

logger = logging.getLogger(__name__)


class UpdatePriorityRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    priority_order: int = Field(..., alias="priorityOrder", description="New order; lower sorts first")


class ReorderBacklogRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    item_ids: List[str] = Field(..., alias="itemIds", description="Backlog item ids in desired order")


def create_board_router(app_state):
    """Create board router.

    Args:
        app_state: AppState instance with work_item_service and auth_service

    Returns:
        APIRouter: Router with kanban, backlog and priority endpoints
    """
    router = APIRouter(tags=["boards"])
    get_current_user = create_current_user_dependency(app_state)

    @router.get("/projects/{project_id}/kanban")
    async def get_kanban_board(project_id: str, current_user: User = Depends(get_current_user)):
        board = await app_state.work_item_service.get_kanban_board(project_id, current_user.id)
        return success_response(
            {
                "kanbanBoard": {
                    status: [item.to_dict() for item in items]
                    for status, items in board.items()
                }
            },
            "Kanban board retrieved successfully",
        )

    @router.get("/projects/{project_id}/backlog")
    async def get_backlog(project_id: str, current_user: User = Depends(get_current_user)):
        backlog = await app_state.work_item_service.get_backlog(project_id, current_user.id)
        return success_response(
            {"backlogItems": [item.to_dict() for item in backlog]},
            "Backlog retrieved successfully",
        )

    @router.put("/projects/{project_id}/backlog")
    async def reorder_backlog(
        project_id: str,
        request: ReorderBacklogRequest,
        current_user: User = Depends(get_current_user),
    ):
        backlog = await app_state.work_item_service.reorder_backlog(
            project_id, request.item_ids, current_user.id
        )
        return success_response(
            {"backlogItems": [item.to_dict() for item in backlog]},
            "Backlog reordered successfully",
        )

    @router.patch("/items/{work_item_id}/priority")
    async def update_priority(
        work_item_id: str,
        request: UpdatePriorityRequest,
        expected_version: Optional[int] = Depends(expected_version_header),
        current_user: User = Depends(get_current_user),
    ):
        work_item = await app_state.work_item_service.update_priority(
            work_item_id, request.priority_order, current_user.id, expected_version=expected_version
        )
        return success_response(
            {"workItem": work_item.to_dict()},
            "Work item priority updated successfully",
            headers=version_headers(work_item),
        )

    return router
