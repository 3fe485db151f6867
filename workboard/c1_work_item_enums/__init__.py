"""Enumerations for work items, projects and users."""

from workboard.c1_work_item_enums.work_item_enums import (
    WorkItemStatus,
    WorkItemType,
    WorkItemPriority,
    ProjectStatus,
    UserRole,
)

__all__ = ["WorkItemStatus", "WorkItemType", "WorkItemPriority", "ProjectStatus", "UserRole"]
