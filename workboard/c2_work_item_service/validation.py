"""Field validation helpers for work items."""

from typing import Any, Dict

from workboard.c1_work_item_enums import WorkItemPriority, WorkItemStatus, WorkItemType
from workboard.core.errors import ValidationError

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000
STORY_POINTS_RANGE = (1, 100)
ESTIMATED_HOURS_RANGE = (1, 1000)

UPDATABLE_FIELDS = (
    "title",
    "description",
    "type",
    "status",
    "priority",
    "assignee_id",
    "story_points",
    "estimated_hours",
)


def require(value: Any, message: str) -> None:
    """Raise ValidationError if value is missing or blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(message)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_title(title: Any) -> None:
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Work item title cannot be empty")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(f"Work item title must be less than {TITLE_MAX_LENGTH} characters")


def validate_description(description: Any) -> None:
    if description is None:
        return
    if not isinstance(description, str):
        raise ValidationError("Work item description must be a string")
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Work item description must be less than {DESCRIPTION_MAX_LENGTH} characters"
        )


def validate_type(item_type: Any) -> None:
    if item_type not in WorkItemType.values():
        raise ValidationError("Invalid work item type", details={"allowed": WorkItemType.values()})


def validate_status(status: Any) -> None:
    if status not in WorkItemStatus.values():
        raise ValidationError(
            "Invalid work item status", details={"allowed": WorkItemStatus.values()}
        )


def validate_priority(priority: Any) -> None:
    if priority not in WorkItemPriority.values():
        raise ValidationError(
            "Invalid work item priority", details={"allowed": WorkItemPriority.values()}
        )


def _validate_range(value: Any, bounds, message: str) -> None:
    if value is None:
        return
    low, high = bounds
    if not _is_int(value) or not low <= value <= high:
        raise ValidationError(message)


def validate_story_points(story_points: Any) -> None:
    _validate_range(story_points, STORY_POINTS_RANGE, "Story points must be between 1 and 100")


def validate_estimated_hours(estimated_hours: Any) -> None:
    _validate_range(
        estimated_hours, ESTIMATED_HOURS_RANGE, "Estimated hours must be between 1 and 1000"
    )


def validate_priority_order(priority_order: Any) -> None:
    if not _is_int(priority_order) or priority_order < 0:
        raise ValidationError("Priority order must be a non-negative integer")


def validate_update_fields(changes: Dict[str, Any]) -> None:
    """
    Validate a partial update.

    Each supplied field goes through the same rule as on creation. Unknown
    fields are rejected rather than silently ignored.

    Raises:
        ValidationError: On the first invalid field
    """
    unknown = sorted(set(changes) - set(UPDATABLE_FIELDS))
    if unknown:
        raise ValidationError(
            f"Field(s) cannot be updated: {', '.join(unknown)}",
            details={"allowed": list(UPDATABLE_FIELDS)},
        )

    if "title" in changes:
        validate_title(changes["title"])
    if "description" in changes:
        validate_description(changes["description"])
    if "type" in changes:
        validate_type(changes["type"])
    if "status" in changes:
        validate_status(changes["status"])
    if "priority" in changes:
        validate_priority(changes["priority"])
    if "story_points" in changes:
        validate_story_points(changes["story_points"])
    if "estimated_hours" in changes:
        validate_estimated_hours(changes["estimated_hours"])
