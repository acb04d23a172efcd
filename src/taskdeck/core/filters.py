"""Filter stage: narrow a snapshot by status, priority, due-date bucket and text.

Pure functions - no I/O.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from .choices import coerce_enum
from .predicates import (
    is_overdue,
    is_today,
    is_tomorrow,
    is_within_current_week,
    matches_search,
    normalize_query,
)
from .tasks import Priority, Status, Task


class StatusFilter(Enum):
    ALL = "ALL"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


class PriorityFilter(Enum):
    ALL = "ALL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class DateBucket(Enum):
    ALL = "ALL"
    TODAY = "TODAY"
    TOMORROW = "TOMORROW"
    THIS_WEEK = "THIS_WEEK"
    OVERDUE = "OVERDUE"


# Aliases used by the original task list ("week" for this week)
_BUCKET_ALIASES = {"WEEK": DateBucket.THIS_WEEK}


@dataclass(frozen=True)
class FilterCriteria:
    """View parameters for the filter stage. ALL / empty query are no-ops."""

    status: StatusFilter = StatusFilter.ALL
    priority: PriorityFilter = PriorityFilter.ALL
    date_bucket: DateBucket = DateBucket.ALL
    query: str = ""

    @property
    def is_identity(self) -> bool:
        return (
            self.status is StatusFilter.ALL
            and self.priority is PriorityFilter.ALL
            and self.date_bucket is DateBucket.ALL
            and not normalize_query(self.query)
        )

    def normalized(self) -> "FilterCriteria":
        """Copy with every field coerced to a known member."""
        return FilterCriteria(
            status=coerce_enum(StatusFilter, self.status, StatusFilter.ALL),
            priority=coerce_enum(PriorityFilter, self.priority, PriorityFilter.ALL),
            date_bucket=_coerce_bucket(self.date_bucket),
            query=self.query if isinstance(self.query, str) else "",
        )

    @classmethod
    def from_params(
        cls,
        status: object = None,
        priority: object = None,
        date_bucket: object = None,
        query: str | None = None,
    ) -> "FilterCriteria":
        """Build criteria from loosely typed UI/CLI values."""
        return cls(
            status=status,
            priority=priority,
            date_bucket=date_bucket,
            query=query or "",
        ).normalized()


def _coerce_bucket(value: object) -> DateBucket:
    if isinstance(value, str):
        alias = _BUCKET_ALIASES.get(value.strip().upper())
        if alias:
            return alias
    return coerce_enum(DateBucket, value, DateBucket.ALL)


def matches_status(task: Task, status: StatusFilter) -> bool:
    if status is StatusFilter.ALL:
        return True
    return task.status is Status(status.value)


def matches_priority(task: Task, priority: PriorityFilter) -> bool:
    if priority is PriorityFilter.ALL:
        return True
    return task.priority is Priority(priority.value)


def matches_date_bucket(task: Task, bucket: DateBucket, as_of: date) -> bool:
    """Tasks with malformed dates match only the ALL bucket."""
    match bucket:
        case DateBucket.ALL:
            return True
        case DateBucket.TODAY:
            return is_today(task.due_date, as_of)
        case DateBucket.TOMORROW:
            return is_tomorrow(task.due_date, as_of)
        case DateBucket.THIS_WEEK:
            return is_within_current_week(task.due_date, as_of)
        case DateBucket.OVERDUE:
            return is_overdue(task, as_of)
    return True


def filter_tasks(
    tasks: list[Task],
    criteria: FilterCriteria | None = None,
    as_of: date | None = None,
) -> list[Task]:
    """
    Apply every criterion as an AND-conjunct.

    Returns a new list; survivors keep their input order.
    Pure function - no I/O.
    """
    criteria = (criteria or FilterCriteria()).normalized()
    if criteria.is_identity:
        return list(tasks)

    as_of = as_of or date.today()
    return [
        t
        for t in tasks
        if matches_status(t, criteria.status)
        and matches_priority(t, criteria.priority)
        and matches_date_bucket(t, criteria.date_bucket, as_of)
        and matches_search(t, criteria.query)
    ]


def filter_by_status(tasks: list[Task], status: Status) -> list[Task]:
    """Tasks with the given status, snapshot order."""
    return [t for t in tasks if t.status is status]
