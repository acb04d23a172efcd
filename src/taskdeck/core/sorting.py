"""Sort stage: order a snapshot by due date or priority.

Pure functions - no I/O. Python's sort is stable (also with reverse=True),
so ties always keep their input order.
"""

from datetime import date, datetime
from enum import Enum

from .choices import coerce_enum
from .tasks import Task


class SortStrategy(Enum):
    DATE_ASC = "DATE_ASC"
    DATE_DESC = "DATE_DESC"
    PRIORITY_ASC = "PRIORITY_ASC"
    PRIORITY_DESC = "PRIORITY_DESC"

    @classmethod
    def parse(cls, value: object) -> "SortStrategy":
        """Accepts "date-asc", "priority_desc", members, etc."""
        return coerce_enum(cls, value, DEFAULT_SORT)


DEFAULT_SORT = SortStrategy.DATE_ASC


def _date_key(task: Task) -> tuple[bool, date]:
    # Malformed dates sort after every valid date
    due = task.due_date
    return (due is None, due or date.min)


def _reverse_date_key(task: Task) -> tuple[bool, date]:
    # Used with reverse=True, so valid (True) comes first
    due = task.due_date
    return (due is not None, due or date.min)


def _priority_key(task: Task) -> int:
    return task.priority.rank


def sort_tasks(tasks: list[Task], strategy: SortStrategy | str = DEFAULT_SORT) -> list[Task]:
    """
    Return a new list ordered by strategy.

    Only the calendar date is compared; time of day never breaks ties.
    Pure function - no I/O.
    """
    match SortStrategy.parse(strategy):
        case SortStrategy.DATE_ASC:
            return sorted(tasks, key=_date_key)
        case SortStrategy.DATE_DESC:
            return sorted(tasks, key=_reverse_date_key, reverse=True)
        case SortStrategy.PRIORITY_ASC:
            return sorted(tasks, key=_priority_key)
        case SortStrategy.PRIORITY_DESC:
            return sorted(tasks, key=_priority_key, reverse=True)
    return list(tasks)


def sort_by_updated(tasks: list[Task]) -> list[Task]:
    """Most recently updated first. Unparseable timestamps go last."""

    def sort_key(t: Task) -> tuple[bool, datetime]:
        updated = t.updated
        return (updated is not None, updated or datetime.min)

    return sorted(tasks, key=sort_key, reverse=True)
