"""Merging single-record mutation results into a held snapshot.

Pure functions - every call returns a new list.
"""

from .tasks import Task


def index_by_id(snapshot: list[Task]) -> dict[int, Task]:
    """Map id to task. A later duplicate id wins."""
    return {t.id: t for t in snapshot}


def find_task(snapshot: list[Task], task_id: int) -> Task | None:
    return next((t for t in snapshot if t.id == task_id), None)


def merge_task(snapshot: list[Task], task: Task) -> list[Task]:
    """Replace the record with task's id in place, or append it if new."""
    if task.id not in index_by_id(snapshot):
        return [*snapshot, task]
    return [task if t.id == task.id else t for t in snapshot]


def remove_task(snapshot: list[Task], task_id: int) -> list[Task]:
    """Drop the record with task_id. Missing ids are a no-op."""
    return [t for t in snapshot if t.id != task_id]
