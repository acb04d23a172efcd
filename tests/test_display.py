"""Tests for plain-text rendering."""

from datetime import date, timedelta

from taskdeck.core.calendar import DayBucket, project_month
from taskdeck.core.stats import summarize
from taskdeck.core.tasks import Priority, Status
from taskdeck.display import (
    format_cell,
    format_due,
    format_month,
    format_statistics,
    format_task_detail,
    format_task_line,
)


class TestFormatDue:
    def test_overdue(self, make_task, today):
        assert format_due(make_task(1, due=today - timedelta(days=2)), today) == "OVERDUE by 2d"

    def test_today(self, make_task, today):
        assert format_due(make_task(1, due=today), today) == "due TODAY"

    def test_future(self, make_task, today):
        assert format_due(make_task(1, due=today + timedelta(days=3)), today) == "due in 3d"

    def test_completed_past_is_not_overdue(self, make_task, today):
        task = make_task(1, due=today - timedelta(days=2), status=Status.COMPLETED)
        assert format_due(task, today) == "was due 2d ago"

    def test_invalid(self, make_task, today):
        assert format_due(make_task(1, due="soon"), today) == "invalid date 'soon'"


class TestFormatTaskLine:
    def test_pending_high(self, make_task, today):
        task = make_task(12, "Pay rent", due=today, priority=Priority.HIGH)
        assert format_task_line(task, today) == "[ ] !!! #12 Pay rent (2025-01-15 All day, due TODAY)"

    def test_completed_with_time(self, make_task, today):
        task = make_task(3, "Gym", due=today, status=Status.COMPLETED, time="18:30:00", priority=Priority.LOW)
        assert format_task_line(task, today) == "[x] !   #3 Gym (2025-01-15 6:30 PM, due TODAY)"

    def test_detail_includes_description(self, make_task, today):
        task = make_task(3, "Gym", description="Leg day", status=Status.COMPLETED)
        detail = format_task_detail(task, today)

        assert detail.startswith("#3 Gym")
        assert "Status:   COMPLETED" in detail
        assert "Done:     2025-01-10T09:00:00" in detail
        assert detail.endswith("Leg day")


class TestFormatStatistics:
    def test_sections(self, make_task, today):
        tasks = [
            make_task(1, "Today thing", due=today),
            make_task(2, "Late thing", due=today - timedelta(days=1), status=Status.COMPLETED),
        ]
        text = format_statistics(summarize(tasks, as_of=today), today)

        assert "Total: 2  Completed: 1  Pending: 1" in text
        assert "Completion: 50%" in text
        assert "### Today\n[ ]" in text
        assert "Nothing overdue." in text
        assert "No upcoming tasks." in text

    def test_empty(self, today):
        text = format_statistics(summarize([], as_of=today), today)
        assert "Completion: 0%" in text
        assert "No recent activity." in text


class TestFormatMonth:
    def test_cells(self, make_task):
        assert format_cell(DayBucket(None)) == "      "
        assert format_cell(DayBucket(date(2025, 1, 5))) == "  5   "
        bucket = DayBucket(date(2025, 1, 15), tuple(make_task(i) for i in range(3)))
        assert format_cell(bucket) == " 15(3)"

    def test_grid_and_overflow(self, make_task, today):
        tasks = [make_task(i, f"Task {i}", due=today) for i in range(1, 6)]
        text = format_month(project_month(tasks, 2025, 1), today, cell_limit=3)
        lines = text.splitlines()

        assert lines[0] == "January 2025"
        assert lines[1].split() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        assert lines[2].split() == ["1", "2", "3", "4"]
        assert "### Wednesday, January 15" in text
        assert "Task 3" in text
        assert "Task 4" not in text
        assert "+ 2 more" in text

    def test_invalid_month(self):
        assert format_month([]) == "No such month."
