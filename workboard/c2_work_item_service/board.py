"""Status transitions, priority ordering and board projections.

Pure functions over work items. Nothing here touches storage.
"""

from typing import Dict, FrozenSet, Iterable, List, Sequence

from workboard.c1_work_item_enums import WorkItemStatus

TODO = WorkItemStatus.TODO.value
IN_PROGRESS = WorkItemStatus.IN_PROGRESS.value
DONE = WorkItemStatus.DONE.value

# Kanban board, not a pipeline: every column may move to any other column.
# Same-status moves are handled separately as no-ops.
ALLOWED_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    TODO: frozenset({IN_PROGRESS, DONE}),
    IN_PROGRESS: frozenset({TODO, DONE}),
    DONE: frozenset({IN_PROGRESS, TODO}),
}


def is_allowed_transition(current_status: str, new_status: str) -> bool:
    """
    Check a status change against the transition table.

    Args:
        current_status: Status the item currently has
        new_status: Requested status

    Returns:
        True if the move is permitted (always True when both are equal and valid)
    """
    if current_status not in ALLOWED_TRANSITIONS or new_status not in ALLOWED_TRANSITIONS:
        return False
    if current_status == new_status:
        return True
    return new_status in ALLOWED_TRANSITIONS[current_status]


def next_priority_order(existing_items: Iterable) -> int:
    """
    Priority order for an item appended to a project.

    One more than the highest order already used in the project, starting
    at 1 for an empty project.
    """
    return max((item.priority_order for item in existing_items), default=0) + 1


def sort_by_priority(items: Iterable) -> List:
    """Ascending priority order; stable, so ties keep their input order."""
    return sorted(items, key=lambda item: item.priority_order)


def build_backlog(items: Iterable) -> List:
    """Items still in ``todo``, highest priority (lowest order) first."""
    return sort_by_priority(item for item in items if item.status == TODO)


def build_kanban_board(items: Sequence) -> Dict[str, List]:
    """
    Partition items into the three board columns.

    ``todo`` and ``in_progress`` are ordered by priority order. ``done`` is
    ordered by most recent update first.
    """
    columns: Dict[str, List] = {TODO: [], IN_PROGRESS: [], DONE: []}
    for item in items:
        columns[item.status].append(item)

    return {
        TODO: sort_by_priority(columns[TODO]),
        IN_PROGRESS: sort_by_priority(columns[IN_PROGRESS]),
        DONE: sorted(columns[DONE], key=lambda item: item.updated_at, reverse=True),
    }
