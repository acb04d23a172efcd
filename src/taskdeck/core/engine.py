"""Query engine facade: compose the stages over one snapshot.

Pure business logic with no I/O beyond diagnostic logging. Nothing is cached;
callers re-derive every view after each snapshot or parameter change.
"""

from dataclasses import dataclass, field
from datetime import date

from .calendar import CALENDAR_CELL_LIMIT, DayBucket, project_month
from .filters import FilterCriteria, filter_tasks
from .integrity import IntegrityIssue, report_issues
from .sorting import DEFAULT_SORT, SortStrategy, sort_tasks
from .stats import RECENT_LIMIT, UPCOMING_LIMIT, Statistics, summarize
from .tasks import Task


@dataclass(frozen=True)
class ViewSettings:
    """Display caps. Presentation choices, not engine invariants."""

    upcoming_limit: int = UPCOMING_LIMIT
    recent_limit: int = RECENT_LIMIT
    calendar_cell_limit: int = CALENDAR_CELL_LIMIT


@dataclass
class DerivedViews:
    """Every view derived from one snapshot and one set of parameters."""

    tasks: list[Task]
    statistics: Statistics
    calendar: list[DayBucket]
    issues: list[IntegrityIssue] = field(default_factory=list)
    calendar_cell_limit: int = CALENDAR_CELL_LIMIT


def query(
    snapshot: list[Task],
    criteria: FilterCriteria | None = None,
    strategy: SortStrategy | str = DEFAULT_SORT,
    as_of: date | None = None,
) -> list[Task]:
    """Filter then sort. The snapshot is never mutated."""
    report_issues(snapshot)
    return sort_tasks(filter_tasks(snapshot, criteria, as_of), strategy)


def derive_views(
    snapshot: list[Task],
    criteria: FilterCriteria | None = None,
    strategy: SortStrategy | str = DEFAULT_SORT,
    year: int | None = None,
    month: int | None = None,
    as_of: date | None = None,
    settings: ViewSettings | None = None,
) -> DerivedViews:
    """
    Recompute the task list, dashboard statistics and month grid.

    Statistics and calendar cover the whole snapshot, not the filtered list.
    The calendar month defaults to the month of as_of.
    """
    as_of = as_of or date.today()
    settings = settings or ViewSettings()
    issues = report_issues(snapshot)

    return DerivedViews(
        tasks=sort_tasks(filter_tasks(snapshot, criteria, as_of), strategy),
        statistics=summarize(
            snapshot,
            as_of,
            upcoming_limit=settings.upcoming_limit,
            recent_limit=settings.recent_limit,
        ),
        calendar=project_month(snapshot, year or as_of.year, month or as_of.month),
        issues=issues,
        calendar_cell_limit=settings.calendar_cell_limit,
    )
