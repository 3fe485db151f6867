"""Service layer for work items: lifecycle, ordering and board views."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from workboard.c1_work_item_models import WorkItem
from workboard.c2_project_service import ProjectService
from workboard.c2_repositories import WorkItemRepository
from workboard.c2_work_item_service.board import (
    TODO,
    build_backlog,
    build_kanban_board,
    is_allowed_transition,
    next_priority_order,
)
from workboard.c2_work_item_service.validation import (
    require,
    validate_description,
    validate_estimated_hours,
    validate_priority,
    validate_priority_order,
    validate_status,
    validate_story_points,
    validate_title,
    validate_type,
    validate_update_fields,
)
from workboard.core.errors import (
    BusinessLogicError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class WorkItemService:
    """Business rules for work items.

    Authorization is delegated to ``project_access.validate_project_access``,
    which answers whether a user may act on a project. Storage is
    delegated to a ``WorkItemRepository``. Storage failures surface as
    ``PersistenceError`` and are never retried here.
    """

    def __init__(
        self, work_item_repository: WorkItemRepository, project_access: ProjectService
    ):
        self.work_item_repository = work_item_repository
        self.project_access = project_access

    async def _require_project_access(self, project_id: str, user_id: str, message: str) -> None:
        has_access = await self.project_access.validate_project_access(project_id, user_id)
        if not has_access:
            logger.warning(
                f"[WORK_ITEM_SERVICE] Access denied: user {user_id} on project {project_id}"
            )
            raise ForbiddenError(message)

    @staticmethod
    def _storage_failure(operation: str, error: Exception) -> PersistenceError:
        logger.error(f"[WORK_ITEM_SERVICE] Failed to {operation}: {error}", exc_info=True)
        return PersistenceError(f"Failed to {operation}")

    @staticmethod
    def _check_version(work_item: WorkItem, expected_version: Optional[int]) -> None:
        if expected_version is not None and expected_version != work_item.version:
            logger.warning(
                f"[WORK_ITEM_SERVICE] Stale write on {work_item.id}: expected version "
                f"{expected_version}, stored {work_item.version}"
            )
            raise ConflictError(
                "Work item was modified by another request",
                details={
                    "expectedVersion": expected_version,
                    "currentVersion": work_item.version,
                },
            )

    async def create_work_item(
        self, data: Dict[str, Any], project_id: str, user_id: str
    ) -> WorkItem:
        """
        Create a work item in a project.

        The item always starts in ``todo`` and is appended after every existing
        item of the project in priority order.

        Args:
            data: title, type, and optionally description, priority,
                assignee_id, story_points, estimated_hours
            project_id: Project the item belongs to
            user_id: Caller; becomes the reporter

        Raises:
            ValidationError: If input is missing or out of range
            ForbiddenError: If the caller cannot act on the project
            PersistenceError: If the item could not be stored
        """
        title = data.get("title")
        if not isinstance(title, str) or not title.strip():
            raise ValidationError("Work item title is required")
        require(project_id, "Project ID is required")
        require(user_id, "User ID is required")

        await self._require_project_access(
            project_id, user_id, "You do not have access to this project"
        )

        validate_title(title)
        validate_description(data.get("description"))
        validate_type(data.get("type"))
        validate_story_points(data.get("story_points"))
        validate_estimated_hours(data.get("estimated_hours"))
        if data.get("priority") is not None:
            validate_priority(data["priority"])

        logger.info(f"[WORK_ITEM_SERVICE] Creating {data['type']} in project {project_id}: {title[:60]}")

        try:
            existing = await self.work_item_repository.find_by_project_id(project_id)
            work_item = await self.work_item_repository.create(
                {
                    "title": title,
                    "description": data.get("description"),
                    "type": data["type"],
                    "priority": data.get("priority"),
                    "assignee_id": data.get("assignee_id"),
                    "story_points": data.get("story_points"),
                    "estimated_hours": data.get("estimated_hours"),
                    "status": TODO,
                    "project_id": project_id,
                    "reporter_id": user_id,
                    "priority_order": next_priority_order(existing),
                }
            )
        except IntegrityError as e:
            raise ValidationError("Invalid assignee ID or reporter ID") from e
        except SQLAlchemyError as e:
            raise self._storage_failure("create work item", e) from e

        logger.info(
            f"[WORK_ITEM_SERVICE] Created work item {work_item.id} "
            f"(priority order {work_item.priority_order})"
        )
        return work_item

    async def get_work_item(self, work_item_id: str, user_id: str) -> WorkItem:
        """
        Load a work item the caller may see.

        Raises:
            ValidationError: If an id is blank
            NotFoundError: If the item does not exist
            ForbiddenError: If the caller cannot act on the item's project
        """
        require(work_item_id, "Work item ID is required")
        require(user_id, "User ID is required")

        try:
            work_item = await self.work_item_repository.find_by_id(work_item_id)
        except SQLAlchemyError as e:
            raise self._storage_failure("retrieve work item", e) from e

        if work_item is None:
            raise NotFoundError("Work item")

        await self._require_project_access(
            work_item.project_id, user_id, "You do not have access to this work item"
        )
        return work_item

    async def _apply_update(
        self,
        work_item_id: str,
        changes: Dict[str, Any],
        operation: str,
        expected_version: Optional[int] = None,
    ) -> WorkItem:
        try:
            updated = await self.work_item_repository.update(
                work_item_id, changes, expected_version=expected_version
            )
        except IntegrityError as e:
            raise ValidationError("Invalid assignee ID") from e
        except SQLAlchemyError as e:
            raise self._storage_failure(operation, e) from e
        if updated is None:
            raise NotFoundError("Work item")
        return updated

    @staticmethod
    def _check_transition(current_status: str, new_status: str) -> None:
        if not is_allowed_transition(current_status, new_status):
            logger.warning(
                f"[WORK_ITEM_SERVICE] Rejected transition {current_status} -> {new_status}"
            )
            raise BusinessLogicError(f"Cannot transition from {current_status} to {new_status}")

    async def update_work_item(
        self,
        work_item_id: str,
        changes: Dict[str, Any],
        user_id: str,
        expected_version: Optional[int] = None,
    ) -> WorkItem:
        """
        Apply a partial update.

        Only supplied fields change. A supplied ``status`` goes through the
        same transition check as ``update_work_item_status``.

        Raises:
            ValidationError, NotFoundError, ForbiddenError, BusinessLogicError,
            ConflictError, PersistenceError
        """
        require(work_item_id, "Work item ID is required")
        require(user_id, "User ID is required")

        existing = await self.get_work_item(work_item_id, user_id)
        validate_update_fields(changes)
        if "status" in changes:
            self._check_transition(existing.status, changes["status"])

        logger.info(
            f"[WORK_ITEM_SERVICE] Updating work item {work_item_id}: {sorted(changes)}"
        )
        return await self._apply_update(
            work_item_id, changes, "update work item", expected_version
        )

    async def delete_work_item(self, work_item_id: str, user_id: str) -> None:
        """Permanently delete a work item."""
        require(work_item_id, "Work item ID is required")
        require(user_id, "User ID is required")

        await self.get_work_item(work_item_id, user_id)

        try:
            deleted = await self.work_item_repository.delete(work_item_id)
        except SQLAlchemyError as e:
            raise self._storage_failure("delete work item", e) from e
        if not deleted:
            raise NotFoundError("Work item")
        logger.info(f"[WORK_ITEM_SERVICE] Deleted work item {work_item_id}")

    async def get_project_work_items(
        self,
        project_id: str,
        user_id: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[WorkItem]:
        """
        List a project's work items, optionally filtered.

        Args:
            filters: Equality filters on status, type, priority, assignee_id.
                None values are ignored.
        """
        require(project_id, "Project ID is required")
        require(user_id, "User ID is required")

        await self._require_project_access(
            project_id, user_id, "You do not have access to this project"
        )

        filters = {key: value for key, value in (filters or {}).items() if value is not None}
        if "status" in filters:
            validate_status(filters["status"])
        if "type" in filters:
            validate_type(filters["type"])
        if "priority" in filters:
            validate_priority(filters["priority"])
        unknown = set(filters) - {"status", "type", "priority", "assignee_id"}
        if unknown:
            raise ValidationError(f"Unknown filter(s): {', '.join(sorted(unknown))}")

        try:
            return await self.work_item_repository.find_by_project_id(project_id, filters)
        except SQLAlchemyError as e:
            raise self._storage_failure("retrieve project work items", e) from e

    async def get_kanban_board(self, project_id: str, user_id: str) -> Dict[str, List[WorkItem]]:
        """Group a project's items into todo / in_progress / done columns."""
        require(project_id, "Project ID is required")
        require(user_id, "User ID is required")

        await self._require_project_access(
            project_id, user_id, "You do not have access to this project"
        )

        try:
            work_items = await self.work_item_repository.find_by_project_id(project_id)
        except SQLAlchemyError as e:
            raise self._storage_failure("retrieve Kanban board", e) from e

        return build_kanban_board(work_items)

    async def update_work_item_status(
        self,
        work_item_id: str,
        status: str,
        user_id: str,
        expected_version: Optional[int] = None,
    ) -> WorkItem:
        """
        Move a work item to another board column.

        Moving to the current status is a no-op and returns the item unchanged,
        provided expected_version (when given) still matches.

        Raises:
            ValidationError: If an id is blank or the status is unknown
            NotFoundError: If the item does not exist
            ForbiddenError: If the caller cannot act on the item's project
            BusinessLogicError: If the transition is not allowed
            ConflictError: If expected_version is stale
        """
        require(work_item_id, "Work item ID is required")
        require(user_id, "User ID is required")
        validate_status(status)

        existing = await self.get_work_item(work_item_id, user_id)
        self._check_transition(existing.status, status)

        if existing.status == status:
            self._check_version(existing, expected_version)
            return existing

        logger.info(
            f"[WORK_ITEM_SERVICE] Work item {work_item_id}: {existing.status} -> {status}"
        )
        return await self._apply_update(
            work_item_id, {"status": status}, "update work item status", expected_version
        )

    async def get_backlog(self, project_id: str, user_id: str) -> List[WorkItem]:
        """A project's todo items, highest priority (lowest order) first."""
        require(project_id, "Project ID is required")
        require(user_id, "User ID is required")

        await self._require_project_access(
            project_id, user_id, "You do not have access to this project"
        )

        try:
            backlog_items = await self.work_item_repository.find_backlog_items(project_id)
        except SQLAlchemyError as e:
            raise self._storage_failure("retrieve backlog", e) from e

        return build_backlog(backlog_items)

    async def update_priority(
        self,
        work_item_id: str,
        priority_order: int,
        user_id: str,
        expected_version: Optional[int] = None,
    ) -> WorkItem:
        """
        Store a new priority order for one item.

        Other items are not renumbered; callers choose non-colliding values.
        """
        require(work_item_id, "Work item ID is required")
        require(user_id, "User ID is required")
        validate_priority_order(priority_order)

        await self.get_work_item(work_item_id, user_id)

        try:
            updated = await self.work_item_repository.update_priority(
                work_item_id, priority_order, expected_version=expected_version
            )
        except SQLAlchemyError as e:
            raise self._storage_failure("update work item priority", e) from e
        if updated is None:
            raise NotFoundError("Work item")
        return updated

    async def reorder_backlog(
        self, project_id: str, item_ids: Sequence[str], user_id: str
    ) -> List[WorkItem]:
        """
        Renumber the backlog in the given order (1..n) and return it.

        Raises:
            ValidationError: If item_ids is empty, has duplicates, or names
                anything other than todo items of this project
        """
        require(project_id, "Project ID is required")
        require(user_id, "User ID is required")
        if not item_ids:
            raise ValidationError("Item IDs are required")
        if len(set(item_ids)) != len(item_ids):
            raise ValidationError("Item IDs must be unique")

        await self._require_project_access(
            project_id, user_id, "You do not have access to this project"
        )

        try:
            backlog_ids = {
                item.id for item in await self.work_item_repository.find_backlog_items(project_id)
            }
            unknown = [item_id for item_id in item_ids if item_id not in backlog_ids]
            if unknown:
                raise ValidationError(
                    "Only backlog items of this project can be reordered",
                    details={"invalidIds": unknown},
                )
            await self.work_item_repository.reorder_backlog_items(project_id, list(item_ids))
            backlog_items = await self.work_item_repository.find_backlog_items(project_id)
        except SQLAlchemyError as e:
            raise self._storage_failure("reorder backlog", e) from e

        logger.info(f"[WORK_ITEM_SERVICE] Reordered {len(item_ids)} backlog item(s) in {project_id}")
        return build_backlog(backlog_items)

    async def assign_work_item(
        self,
        work_item_id: str,
        assignee_id: str,
        user_id: str,
        expected_version: Optional[int] = None,
    ) -> WorkItem:
        """Set the assignee. The assignee id is not checked against existing users."""
        require(work_item_id, "Work item ID is required")
        require(assignee_id, "Assignee ID is required")
        require(user_id, "User ID is required")

        await self.get_work_item(work_item_id, user_id)

        return await self._apply_update(
            work_item_id, {"assignee_id": assignee_id}, "assign work item", expected_version
        )
