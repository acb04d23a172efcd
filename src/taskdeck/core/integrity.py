"""Data-integrity checks on a snapshot.

The engine never raises on bad records. Malformed values are reported here,
as IntegrityIssue records and as warnings on this module's logger.
"""

import logging
from collections import Counter
from dataclasses import dataclass

from .tasks import Status, Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegrityIssue:
    """A problem with one field of one task."""

    task_id: int
    field: str
    value: object
    message: str

    def format(self) -> str:
        return f"task {self.task_id}: {self.field}={self.value!r} ({self.message})"


def find_issues(tasks: list[Task]) -> list[IntegrityIssue]:
    """Collect integrity issues, snapshot order."""
    issues = []
    id_counts = Counter(t.id for t in tasks)

    for t in tasks:
        if id_counts[t.id] > 1:
            issues.append(IntegrityIssue(t.id, "id", t.id, "duplicate id in snapshot"))
        if t.due_date is None:
            issues.append(IntegrityIssue(t.id, "date", t.date, "not a YYYY-MM-DD date"))
        if t.time is not None and t.time_of_day is None:
            issues.append(IntegrityIssue(t.id, "time", t.time, "not an HH:MM:SS time"))
        if t.updated is None:
            issues.append(IntegrityIssue(t.id, "updatedAt", t.updated_at, "not an ISO timestamp"))
        elif t.created is not None and t.updated < t.created:
            issues.append(
                IntegrityIssue(t.id, "updatedAt", t.updated_at, "earlier than createdAt")
            )
        if (t.status is Status.COMPLETED) != (t.completed_at is not None):
            issues.append(
                IntegrityIssue(
                    t.id,
                    "completedAt",
                    t.completed_at,
                    f"inconsistent with status {t.status.value}",
                )
            )

    return issues


def report_issues(tasks: list[Task]) -> list[IntegrityIssue]:
    """Find issues and log each one as a warning."""
    issues = find_issues(tasks)
    for issue in issues:
        logger.warning(f"Data integrity: {issue.format()}")
    return issues
