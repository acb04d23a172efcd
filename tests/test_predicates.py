"""Tests for date, status and search predicates."""

from datetime import date, timedelta

from taskdeck.core.predicates import (
    is_overdue,
    is_today,
    is_tomorrow,
    is_upcoming,
    is_within_current_week,
    matches_search,
    week_bounds,
)
from taskdeck.core.tasks import Status


class TestDayPredicates:
    def test_is_today(self, today):
        assert is_today(today, as_of=today) is True
        assert is_today(today + timedelta(days=1), as_of=today) is False

    def test_is_tomorrow(self, today):
        assert is_tomorrow(today + timedelta(days=1), as_of=today) is True
        assert is_tomorrow(today, as_of=today) is False

    def test_is_tomorrow_across_month_end(self):
        assert is_tomorrow(date(2025, 2, 1), as_of=date(2025, 1, 31)) is True

    def test_none_never_matches(self, today):
        assert is_today(None, as_of=today) is False
        assert is_tomorrow(None, as_of=today) is False
        assert is_within_current_week(None, as_of=today) is False

    def test_defaults_to_wall_clock(self):
        assert is_today(date.today()) is True


class TestCurrentWeek:
    def test_week_bounds_sunday_first(self, today):
        assert week_bounds(today) == (date(2025, 1, 12), date(2025, 1, 18))

    def test_week_bounds_on_sunday(self):
        sunday = date(2025, 1, 12)
        assert week_bounds(sunday) == (sunday, date(2025, 1, 18))

    def test_within_week(self, today):
        assert is_within_current_week(date(2025, 1, 12), as_of=today) is True
        assert is_within_current_week(date(2025, 1, 18), as_of=today) is True

    def test_outside_week(self, today):
        assert is_within_current_week(date(2025, 1, 11), as_of=today) is False
        assert is_within_current_week(date(2025, 1, 19), as_of=today) is False


class TestIsOverdue:
    def test_pending_past_is_overdue(self, make_task, today):
        task = make_task(1, due=today - timedelta(days=1))
        assert is_overdue(task, as_of=today) is True

    def test_today_is_never_overdue(self, make_task, today):
        assert is_overdue(make_task(1, due=today), as_of=today) is False

    def test_completed_is_never_overdue(self, make_task, today):
        task = make_task(1, due=today - timedelta(days=3), status=Status.COMPLETED)
        assert is_overdue(task, as_of=today) is False

    def test_malformed_date_is_not_overdue(self, make_task, today):
        assert is_overdue(make_task(1, due="2025/01/01"), as_of=today) is False


class TestIsUpcoming:
    def test_pending_future(self, make_task, today):
        assert is_upcoming(make_task(1, due=today + timedelta(days=1)), as_of=today) is True

    def test_today_is_not_upcoming(self, make_task, today):
        assert is_upcoming(make_task(1, due=today), as_of=today) is False

    def test_completed_is_not_upcoming(self, make_task, today):
        task = make_task(1, due=today + timedelta(days=1), status=Status.COMPLETED)
        assert is_upcoming(task, as_of=today) is False


class TestMatchesSearch:
    def test_empty_query_matches(self, make_task):
        assert matches_search(make_task(1), "") is True
        assert matches_search(make_task(1), "   ") is True
        assert matches_search(make_task(1), None) is True

    def test_title_case_insensitive(self, make_task):
        assert matches_search(make_task(1, title="Buy Groceries"), "groceries") is True

    def test_description(self, make_task):
        task = make_task(1, title="Errand", description="Pick up the DRY cleaning")
        assert matches_search(task, "dry clean") is True

    def test_query_is_trimmed(self, make_task):
        assert matches_search(make_task(1, title="Call mom"), "  call ") is True

    def test_no_match(self, make_task):
        assert matches_search(make_task(1, title="Call mom", description="Sunday"), "dentist") is False
