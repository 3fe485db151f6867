"""Data access for work items."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from workboard.c1_database_session import DatabaseManager, generate_id, utcnow
from workboard.c1_work_item_models import WorkItem
from workboard.core.errors import ConflictError

logger = logging.getLogger(__name__)

FILTERABLE_FIELDS = ("status", "type", "priority", "assignee_id")


class WorkItemRepository:
    """SQLAlchemy-backed store for work items.

    Every write bumps ``version`` and ``updated_at``. Writes that pass an
    ``expected_version`` only apply if the stored version still matches.
    """

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    @staticmethod
    def _ordered(query):
        return query.order_by(WorkItem.priority_order.asc(), WorkItem.created_at.desc())

    @staticmethod
    def _stale_write(
        work_item_id: str, expected_version: Optional[int], current_version: int
    ) -> ConflictError:
        logger.warning(
            f"[WORK_ITEM_REPOSITORY] Stale write on {work_item_id}: "
            f"expected version {expected_version}, stored {current_version}"
        )
        return ConflictError(
            "Work item was modified by another request",
            details={"expectedVersion": expected_version, "currentVersion": current_version},
        )

    async def create(self, data: Dict[str, Any]) -> WorkItem:
        now = utcnow()
        work_item = WorkItem(
            id=generate_id(),
            title=data["title"],
            description=data.get("description") or "",
            type=data["type"],
            status=data.get("status", "todo"),
            priority=data.get("priority") or "medium",
            project_id=data["project_id"],
            assignee_id=data.get("assignee_id"),
            reporter_id=data["reporter_id"],
            story_points=data.get("story_points"),
            estimated_hours=data.get("estimated_hours"),
            priority_order=data.get("priority_order", 0),
            version=1,
            created_at=now,
            updated_at=now,
        )
        with self.db_manager.session_scope() as db:
            db.add(work_item)
        return work_item

    async def find_by_id(self, work_item_id: str) -> Optional[WorkItem]:
        with self.db_manager.session_scope() as db:
            return db.query(WorkItem).filter_by(id=work_item_id).first()

    async def find_by_project_id(
        self, project_id: str, filters: Optional[Dict[str, Any]] = None
    ) -> List[WorkItem]:
        with self.db_manager.session_scope() as db:
            query = db.query(WorkItem).filter(WorkItem.project_id == project_id)
            for field, value in (filters or {}).items():
                if field not in FILTERABLE_FIELDS:
                    raise ValueError(f"Cannot filter work items by '{field}'")
                query = query.filter(getattr(WorkItem, field) == value)
            return self._ordered(query).all()

    async def find_backlog_items(self, project_id: str) -> List[WorkItem]:
        return await self.find_by_project_id(project_id, {"status": "todo"})

    async def update(
        self,
        work_item_id: str,
        changes: Dict[str, Any],
        expected_version: Optional[int] = None,
    ) -> Optional[WorkItem]:
        """
        Apply field changes to a work item.

        Returns:
            The updated item, or None if it no longer exists

        Raises:
            ConflictError: If expected_version no longer matches
        """
        with self.db_manager.session_scope() as db:
            work_item = db.query(WorkItem).filter_by(id=work_item_id).first()
            if work_item is None:
                return None
            if expected_version is not None and expected_version != work_item.version:
                raise self._stale_write(work_item_id, expected_version, work_item.version)
            if not changes:
                return work_item

            values = dict(changes)
            values["updated_at"] = utcnow()
            values["version"] = WorkItem.version + 1

            query = db.query(WorkItem).filter(WorkItem.id == work_item_id)
            if expected_version is not None:
                query = query.filter(WorkItem.version == expected_version)
            updated = query.update(values, synchronize_session=False)

            if updated == 0:
                raise self._stale_write(work_item_id, expected_version, work_item.version)

            db.refresh(work_item)
            return work_item

    async def update_priority(
        self,
        work_item_id: str,
        priority_order: int,
        expected_version: Optional[int] = None,
    ) -> Optional[WorkItem]:
        return await self.update(work_item_id, {"priority_order": priority_order}, expected_version)

    async def delete(self, work_item_id: str) -> bool:
        with self.db_manager.session_scope() as db:
            deleted = db.query(WorkItem).filter(WorkItem.id == work_item_id).delete(
                synchronize_session=False
            )
        return deleted > 0

    async def reorder_backlog_items(self, project_id: str, item_ids: Sequence[str]) -> None:
        """Assign priority orders 1..n to the given items, in sequence order."""
        now = utcnow()
        with self.db_manager.session_scope() as db:
            for index, item_id in enumerate(item_ids, start=1):
                db.query(WorkItem).filter(
                    WorkItem.id == item_id, WorkItem.project_id == project_id
                ).update(
                    {
                        "priority_order": index,
                        "updated_at": now,
                        "version": WorkItem.version + 1,
                    },
                    synchronize_session=False,
                )
