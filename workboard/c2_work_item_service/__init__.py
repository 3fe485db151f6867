"""C2 Work Item Service - work item lifecycle and board views."""
from workboard.c2_work_item_service.work_item_service import WorkItemService
from workboard.c2_work_item_service.board import (
    ALLOWED_TRANSITIONS,
    build_backlog,
    build_kanban_board,
    is_allowed_transition,
    next_priority_order,
)
__all__ = [
    "WorkItemService",
    "ALLOWED_TRANSITIONS",
    "build_backlog",
    "build_kanban_board",
    "is_allowed_transition",
    "next_priority_order",
]
