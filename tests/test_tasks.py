"""Tests for the task record model."""

from datetime import date, datetime, time, timedelta

import pytest

from taskdeck.core.tasks import (
    Notify,
    Priority,
    Status,
    Task,
    parse_iso_date,
    parse_iso_time,
    parse_timestamp,
)


class TestEnums:
    def test_priority_ranks(self):
        assert Priority.LOW.rank == 1
        assert Priority.MEDIUM.rank == 2
        assert Priority.HIGH.rank == 3

    def test_status_toggled(self):
        assert Status.PENDING.toggled() is Status.COMPLETED
        assert Status.COMPLETED.toggled() is Status.PENDING


class TestParsing:
    def test_parse_iso_date(self):
        assert parse_iso_date("2025-01-20") == date(2025, 1, 20)

    def test_parse_iso_date_with_time_component(self):
        assert parse_iso_date("2025-01-20T00:00:00") == date(2025, 1, 20)

    @pytest.mark.parametrize("value", ["", None, "2025-13-01", "2025-02-30", "tomorrow"])
    def test_parse_iso_date_invalid(self, value):
        assert parse_iso_date(value) is None

    def test_parse_iso_time(self):
        assert parse_iso_time("14:30:00") == time(14, 30)
        assert parse_iso_time("09:05") == time(9, 5)

    def test_parse_iso_time_invalid(self):
        assert parse_iso_time("25:00:00") is None
        assert parse_iso_time(None) is None

    @pytest.mark.parametrize("value", ["20250115", "2025-W03-3", "2025-015", "2025-1-5"])
    def test_parse_iso_date_rejects_other_iso_forms(self, value):
        assert parse_iso_date(value) is None

    @pytest.mark.parametrize("value", ["1430", "9:30", "14:30:00.5", "14:30:00+01:00", "T14:30"])
    def test_parse_iso_time_rejects_other_iso_forms(self, value):
        assert parse_iso_time(value) is None

    def test_parse_timestamp_naive(self):
        assert parse_timestamp("2025-01-10T09:00:00") == datetime(2025, 1, 10, 9, 0)

    def test_parse_timestamp_aware_becomes_naive(self):
        parsed = parse_timestamp("2025-01-10T09:00:00+00:00")
        assert parsed is not None
        assert parsed.tzinfo is None

    def test_parse_timestamp_invalid(self):
        assert parse_timestamp("yesterday") is None


class TestTask:
    def test_due_date(self, make_task, today):
        assert make_task(1, due=today).due_date == today

    def test_due_date_malformed(self, make_task):
        assert make_task(1, due="not-a-date").due_date is None

    def test_is_completed(self, make_task):
        assert make_task(1, status=Status.COMPLETED).is_completed is True
        assert make_task(2).is_completed is False

    def test_days_until_due(self, make_task, today):
        assert make_task(1, due=today + timedelta(days=5)).days_until_due(today) == 5
        assert make_task(2, due=today - timedelta(days=2)).days_until_due(today) == -2
        assert make_task(3, due="bad").days_until_due(today) is None

    def test_format_time_all_day(self, make_task):
        task = make_task(1)
        assert task.is_all_day is True
        assert task.format_time() == "All day"

    def test_format_time(self, make_task):
        assert make_task(1, time="14:30:00").format_time() == "2:30 PM"
        assert make_task(2, time="00:05:00").format_time() == "12:05 AM"
        assert make_task(3, time="12:00:00").format_time() == "12:00 PM"

    def test_format_time_malformed_shows_raw(self, make_task):
        assert make_task(1, time="noonish").format_time() == "noonish"

    def test_is_immutable(self, make_task):
        task = make_task(1)
        with pytest.raises(AttributeError):
            task.title = "changed"

    def test_from_api(self):
        api_data = {
            "id": 7,
            "title": "Pay rent",
            "description": "Transfer before noon",
            "date": "2025-01-20",
            "time": "10:00:00",
            "priority": "HIGH",
            "status": "COMPLETED",
            "notify": "YES",
            "createdAt": "2025-01-01T08:00:00",
            "updatedAt": "2025-01-02T08:00:00",
            "completedAt": "2025-01-02T08:00:00",
        }
        task = Task.from_api(api_data)

        assert task.id == 7
        assert task.title == "Pay rent"
        assert task.due_date == date(2025, 1, 20)
        assert task.time_of_day == time(10, 0)
        assert task.priority is Priority.HIGH
        assert task.status is Status.COMPLETED
        assert task.notify is Notify.YES
        assert task.completed_at == "2025-01-02T08:00:00"

    def test_from_api_defaults(self):
        task = Task.from_api({"id": "3", "title": "T", "date": "2025-01-20", "priority": "LOW"})

        assert task.id == 3
        assert task.description == ""
        assert task.time is None
        assert task.status is Status.PENDING
        assert task.notify is Notify.NO
        assert task.completed_at is None

    def test_from_api_rejects_unknown_priority(self):
        with pytest.raises(ValueError):
            Task.from_api({"id": 1, "title": "T", "date": "2025-01-20", "priority": "URGENT"})

    def test_from_api_requires_date(self):
        with pytest.raises(KeyError):
            Task.from_api({"id": 1, "title": "T", "priority": "LOW"})

    def test_to_api_roundtrip_fields(self, make_task):
        task = make_task(1, status=Status.COMPLETED, time="08:00:00")
        data = task.to_api()

        assert data["priority"] == "MEDIUM"
        assert data["status"] == "COMPLETED"
        assert data["time"] == "08:00:00"
        assert data["completedAt"] == task.completed_at
        assert Task.from_api(data) == task

    def test_to_request_omits_server_fields(self, make_task):
        body = make_task(1).to_request()

        assert set(body) == {"title", "description", "date", "priority", "notify"}
