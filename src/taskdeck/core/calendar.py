"""Calendar month projection - no I/O dependencies."""

import calendar
import logging
from dataclasses import dataclass
from datetime import date

from .predicates import WEEK_STARTS_ON
from .tasks import Task

logger = logging.getLogger(__name__)

CALENDAR_CELL_LIMIT = 3


@dataclass(frozen=True)
class DayBucket:
    """
    One cell of a month grid.

    A placeholder (date is None) only pads the grid so the first day of the
    month lands on its weekday column; it never holds tasks.
    """

    date: date | None
    tasks: tuple[Task, ...] = ()

    @property
    def is_placeholder(self) -> bool:
        return self.date is None

    def preview(self, limit: int = CALENDAR_CELL_LIMIT) -> tuple[list[Task], int]:
        """Tasks to show in the cell and how many are hidden ("+N more")."""
        limit = max(limit, 0)
        visible = list(self.tasks[:limit])
        return visible, len(self.tasks) - len(visible)


def leading_blanks(year: int, month: int) -> int:
    """Placeholders needed before the 1st in a WEEK_STARTS_ON-first grid."""
    first_weekday, _ = calendar.monthrange(year, month)
    return (first_weekday - WEEK_STARTS_ON) % 7


def project_month(tasks: list[Task], year: int, month: int) -> list[DayBucket]:
    """
    Bucket tasks by due day for one month.

    Returns leading placeholders followed by one bucket per day of the month.
    Tasks outside the month, or with malformed dates, are left out.
    Pure function - no I/O.
    """
    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        logger.warning(f"Invalid calendar month {year}-{month}")
        return []

    _, days_in_month = calendar.monthrange(year, month)
    by_day: dict[int, list[Task]] = {day: [] for day in range(1, days_in_month + 1)}
    for t in tasks:
        due = t.due_date
        if due is not None and due.year == year and due.month == month:
            by_day[due.day].append(t)

    buckets = [DayBucket(date=None) for _ in range(leading_blanks(year, month))]
    buckets.extend(
        DayBucket(date=date(year, month, day), tasks=tuple(day_tasks))
        for day, day_tasks in by_day.items()
    )
    return buckets


def month_weeks(buckets: list[DayBucket]) -> list[list[DayBucket]]:
    """Split a projection into week rows, padding the last with placeholders."""
    weeks = [buckets[i : i + 7] for i in range(0, len(buckets), 7)]
    if weeks and len(weeks[-1]) < 7:
        weeks[-1] = weeks[-1] + [DayBucket(date=None)] * (7 - len(weeks[-1]))
    return weeks


def tasks_for_day(tasks: list[Task], day: date) -> list[Task]:
    """Tasks due on a given day, snapshot order."""
    return [t for t in tasks if t.due_date == day]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a (year, month) pair by delta months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1
