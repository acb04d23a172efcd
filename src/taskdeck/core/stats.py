"""Dashboard statistics and named task buckets - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date

from .filters import filter_by_status
from .predicates import is_overdue, is_today, is_upcoming
from .sorting import SortStrategy, sort_by_updated, sort_tasks
from .tasks import Priority, Status, Task

UPCOMING_LIMIT = 5
RECENT_LIMIT = 5


@dataclass
class Statistics:
    """Summary of a snapshot, as shown on the dashboard."""

    total: int = 0
    completed: int = 0
    pending: int = 0
    completion_rate: int = 0
    high_priority_total: int = 0
    high_priority_pending: int = 0
    today_tasks: list[Task] = field(default_factory=list)
    upcoming_tasks: list[Task] = field(default_factory=list)
    recent_tasks: list[Task] = field(default_factory=list)
    overdue_tasks: list[Task] = field(default_factory=list)


def completion_rate(completed: int, total: int) -> int:
    """
    Percentage of completed tasks, rounded half-up to an integer.

    Uses integer arithmetic so 1/8 gives exactly 13 (12.5 rounds up) rather
    than Python's round-half-even 12. Returns 0 for an empty snapshot.
    """
    if total <= 0:
        return 0
    return (completed * 200 + total) // (2 * total)


def today_tasks(tasks: list[Task], as_of: date | None = None) -> list[Task]:
    """Tasks due today, snapshot order."""
    as_of = as_of or date.today()
    return [t for t in tasks if is_today(t.due_date, as_of)]


def upcoming_tasks(
    tasks: list[Task],
    as_of: date | None = None,
    limit: int = UPCOMING_LIMIT,
) -> list[Task]:
    """Next pending tasks due after today, earliest first."""
    as_of = as_of or date.today()
    upcoming = [t for t in tasks if is_upcoming(t, as_of)]
    return sort_tasks(upcoming, SortStrategy.DATE_ASC)[: max(limit, 0)]


def recent_tasks(tasks: list[Task], limit: int = RECENT_LIMIT) -> list[Task]:
    """Most recently updated tasks."""
    return sort_by_updated(tasks)[: max(limit, 0)]


def overdue_tasks(tasks: list[Task], as_of: date | None = None) -> list[Task]:
    """Pending tasks past their due date, snapshot order."""
    as_of = as_of or date.today()
    return [t for t in tasks if is_overdue(t, as_of)]


def summarize(
    tasks: list[Task],
    as_of: date | None = None,
    upcoming_limit: int = UPCOMING_LIMIT,
    recent_limit: int = RECENT_LIMIT,
) -> Statistics:
    """
    Compute dashboard statistics from a snapshot.

    Pure function - no I/O. Recomputed from scratch on every call.
    """
    as_of = as_of or date.today()

    total = len(tasks)
    completed = len(filter_by_status(tasks, Status.COMPLETED))
    high = [t for t in tasks if t.priority is Priority.HIGH]

    return Statistics(
        total=total,
        completed=completed,
        pending=total - completed,
        completion_rate=completion_rate(completed, total),
        high_priority_total=len(high),
        high_priority_pending=len(filter_by_status(high, Status.PENDING)),
        today_tasks=today_tasks(tasks, as_of),
        upcoming_tasks=upcoming_tasks(tasks, as_of, upcoming_limit),
        recent_tasks=recent_tasks(tasks, recent_limit),
        overdue_tasks=overdue_tasks(tasks, as_of),
    )
