"""Shared fixtures."""

from datetime import date

import pytest

from taskdeck.core.tasks import Notify, Priority, Status, Task


@pytest.fixture
def today():
    # A Wednesday; its Sunday-first week is Jan 12 - Jan 18
    return date(2025, 1, 15)


@pytest.fixture
def make_task(today):
    """Factory for creating tasks."""

    def _make(
        id: int,
        title: str = "Task",
        due: date | str | None = None,
        priority: Priority = Priority.MEDIUM,
        status: Status = Status.PENDING,
        description: str = "",
        time: str | None = None,
        updated_at: str = "2025-01-10T09:00:00",
    ) -> Task:
        if due is None:
            due = today
        return Task(
            id=id,
            title=title,
            description=description,
            date=due.isoformat() if isinstance(due, date) else due,
            time=time,
            priority=priority,
            status=status,
            notify=Notify.NO,
            created_at="2025-01-01T08:00:00",
            updated_at=updated_at,
            completed_at=updated_at if status is Status.COMPLETED else None,
        )

    return _make
