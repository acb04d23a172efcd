"""Plain-text rendering of derived views.

Pure functions - no I/O.
"""

from datetime import date

from .core.calendar import CALENDAR_CELL_LIMIT, DayBucket, month_weeks
from .core.predicates import is_overdue
from .core.stats import Statistics
from .core.tasks import Priority, Task

_PRIORITY_MARKERS = {Priority.HIGH: "!!!", Priority.MEDIUM: "!! ", Priority.LOW: "!  "}
_WEEKDAY_HEADER = " Sun   Mon   Tue   Wed   Thu   Fri   Sat"


def format_due(task: Task, as_of: date | None = None) -> str:
    """Relative due label: "OVERDUE by 2d", "due TODAY", "due in 3d"."""
    as_of = as_of or date.today()
    days = task.days_until_due(as_of)
    if days is None:
        return f"invalid date {task.date!r}"
    if is_overdue(task, as_of):
        return f"OVERDUE by {-days}d"
    if days == 0:
        return "due TODAY"
    if days < 0:
        return f"was due {-days}d ago"
    return f"due in {days}d"


def format_task_line(task: Task, as_of: date | None = None) -> str:
    """
    Format a single task for a list.

    Example: "[x] !!! #12 Pay rent (2025-01-15 All day, due TODAY)"
    """
    check = "x" if task.is_completed else " "
    marker = _PRIORITY_MARKERS[task.priority]
    return (
        f"[{check}] {marker} #{task.id} {task.title} "
        f"({task.date} {task.format_time()}, {format_due(task, as_of)})"
    )


def format_task_detail(task: Task, as_of: date | None = None) -> str:
    lines = [
        f"#{task.id} {task.title}",
        f"  Status:   {task.status.value}",
        f"  Priority: {task.priority.value}",
        f"  Due:      {task.date} {task.format_time()} ({format_due(task, as_of)})",
        f"  Notify:   {task.notify.value}",
        f"  Created:  {task.created_at}",
        f"  Updated:  {task.updated_at}",
    ]
    if task.completed_at:
        lines.append(f"  Done:     {task.completed_at}")
    if task.description:
        lines.extend(["", f"  {task.description}"])
    return "\n".join(lines)


def format_statistics(stats: Statistics, as_of: date | None = None) -> str:
    """Render dashboard statistics and buckets as markdown-ish text."""

    def section(title: str, tasks: list[Task], empty: str) -> str:
        body = "\n".join(format_task_line(t, as_of) for t in tasks) or empty
        return f"### {title}\n{body}"

    summary = (
        f"Total: {stats.total}  Completed: {stats.completed}  Pending: {stats.pending}\n"
        f"Completion: {stats.completion_rate}%\n"
        f"High priority: {stats.high_priority_total} ({stats.high_priority_pending} pending)"
    )
    return "\n\n".join(
        [
            summary,
            section("Today", stats.today_tasks, "No tasks today."),
            section("Overdue", stats.overdue_tasks, "Nothing overdue."),
            section("Upcoming", stats.upcoming_tasks, "No upcoming tasks."),
            section("Recent activity", stats.recent_tasks, "No recent activity."),
        ]
    )


def format_cell(bucket: DayBucket) -> str:
    """Six-character grid cell: day number plus a task count."""
    if bucket.is_placeholder:
        return " " * 6
    n = len(bucket.tasks)
    count = "" if not n else f"({n})" if n < 10 else "(+)"
    return f" {bucket.date.day:>2}{count:<3}"


def format_month(
    buckets: list[DayBucket],
    as_of: date | None = None,
    cell_limit: int = CALENDAR_CELL_LIMIT,
) -> str:
    """Render a month projection as a grid followed by per-day task previews."""
    if not buckets:
        return "No such month."

    real_days = [b for b in buckets if not b.is_placeholder]
    header = real_days[0].date.strftime("%B %Y")
    grid = "\n".join(
        "".join(format_cell(b) for b in week).rstrip() for week in month_weeks(buckets)
    )

    details = []
    for bucket in real_days:
        if not bucket.tasks:
            continue
        visible, hidden = bucket.preview(cell_limit)
        details.append(f"### {bucket.date.strftime('%A, %B %d')}")
        details.extend(f"  {format_task_line(t, as_of)}" for t in visible)
        if hidden:
            details.append(f"  + {hidden} more")

    parts = [header, _WEEKDAY_HEADER, grid]
    if details:
        parts.append("\n" + "\n".join(details))
    return "\n".join(parts)
