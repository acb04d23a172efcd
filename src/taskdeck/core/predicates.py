"""Date, status and search predicates over single tasks.

Every date check takes an ``as_of`` reference date that defaults to today.
A ``None`` day (a task whose stored date is malformed) never matches.
"""

import calendar
from datetime import date, timedelta

from .tasks import Status, Task

WEEK_STARTS_ON = calendar.SUNDAY


def week_bounds(as_of: date | None = None) -> tuple[date, date]:
    """First and last day of the week containing as_of."""
    as_of = as_of or date.today()
    offset = (as_of.weekday() - WEEK_STARTS_ON) % 7
    start = as_of - timedelta(days=offset)
    return start, start + timedelta(days=6)


def is_today(day: date | None, as_of: date | None = None) -> bool:
    if day is None:
        return False
    return day == (as_of or date.today())


def is_tomorrow(day: date | None, as_of: date | None = None) -> bool:
    if day is None:
        return False
    as_of = as_of or date.today()
    return day == as_of + timedelta(days=1)


def is_within_current_week(day: date | None, as_of: date | None = None) -> bool:
    """Same Sunday-first calendar week as as_of (past days included)."""
    if day is None:
        return False
    start, end = week_bounds(as_of)
    return start <= day <= end


def is_overdue(task: Task, as_of: date | None = None) -> bool:
    """Pending and due strictly before today. Due today is never overdue."""
    if task.status is not Status.PENDING:
        return False
    due = task.due_date
    if due is None:
        return False
    return due < (as_of or date.today())


def is_upcoming(task: Task, as_of: date | None = None) -> bool:
    """Pending and due strictly after today."""
    if task.status is not Status.PENDING:
        return False
    due = task.due_date
    if due is None:
        return False
    return due > (as_of or date.today())


def normalize_query(query: str | None) -> str:
    return (query or "").strip().casefold()


def matches_search(task: Task, query: str | None) -> bool:
    """Case-insensitive substring match on title or description."""
    needle = normalize_query(query)
    if not needle:
        return True
    return needle in task.title.casefold() or needle in task.description.casefold()
