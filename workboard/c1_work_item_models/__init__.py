"""Work item models for Workboard."""

from workboard.c1_work_item_models.work_item import WorkItem

__all__ = ["WorkItem"]
