"""Functional core - pure business logic with no I/O."""

from .tasks import Task, Priority, Status, Notify
from .predicates import is_today, is_tomorrow, is_within_current_week, is_overdue, matches_search
from .filters import FilterCriteria, StatusFilter, PriorityFilter, DateBucket, filter_tasks
from .sorting import SortStrategy, sort_tasks
from .stats import Statistics, summarize
from .calendar import DayBucket, project_month, month_weeks, tasks_for_day
from .integrity import IntegrityIssue, find_issues
from .snapshot import merge_task, remove_task
from .engine import DerivedViews, ViewSettings, query, derive_views

__all__ = [
    # Tasks
    "Task",
    "Priority",
    "Status",
    "Notify",
    # Predicates
    "is_today",
    "is_tomorrow",
    "is_within_current_week",
    "is_overdue",
    "matches_search",
    # Filter / sort
    "FilterCriteria",
    "StatusFilter",
    "PriorityFilter",
    "DateBucket",
    "filter_tasks",
    "SortStrategy",
    "sort_tasks",
    # Aggregation
    "Statistics",
    "summarize",
    # Calendar
    "DayBucket",
    "project_month",
    "month_weeks",
    "tasks_for_day",
    # Snapshot
    "IntegrityIssue",
    "find_issues",
    "merge_task",
    "remove_task",
    # Engine
    "DerivedViews",
    "ViewSettings",
    "query",
    "derive_views",
]
