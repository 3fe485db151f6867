"""Work item, project and user enums for Workboard."""

from enum import Enum
from typing import List


class _ValuesMixin:
    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class WorkItemStatus(_ValuesMixin, Enum):
    """Kanban column a work item sits in."""
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class WorkItemType(_ValuesMixin, Enum):
    """Kind of work item."""
    TASK = "task"
    BUG = "bug"
    STORY = "story"


class WorkItemPriority(_ValuesMixin, Enum):
    """Coarse priority label, independent of backlog ordering."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ProjectStatus(_ValuesMixin, Enum):
    """Project lifecycle state."""
    ACTIVE = "active"
    ARCHIVED = "archived"
    COMPLETED = "completed"


class UserRole(_ValuesMixin, Enum):
    """Role assigned at registration."""
    ADMIN = "admin"
    MANAGER = "manager"
    DEVELOPER = "developer"
