"""Pure task domain logic - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from datetime import time as clock_time
from enum import Enum

ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
ISO_TIME = re.compile(r"[0-9]{2}:[0-9]{2}(:[0-9]{2})?")


class Priority(Enum):
    """Task priority. HIGH > MEDIUM > LOW."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANKS[self]


_PRIORITY_RANKS = {Priority.LOW: 1, Priority.MEDIUM: 2, Priority.HIGH: 3}


class Status(Enum):
    """Task completion status."""

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"

    def toggled(self) -> "Status":
        return Status.PENDING if self is Status.COMPLETED else Status.COMPLETED


class Notify(Enum):
    """Whether the user wants a reminder. Display only."""

    YES = "YES"
    NO = "NO"


def parse_iso_date(value: str | None) -> date | None:
    """Parse a YYYY-MM-DD string. Returns None if missing or malformed."""
    if not value or not isinstance(value, str):
        return None
    # Tolerate a trailing time component ("2025-01-15T00:00:00")
    day = value.split("T")[0]
    if not ISO_DATE.fullmatch(day):
        return None
    try:
        return date.fromisoformat(day)
    except ValueError:
        return None


def parse_iso_time(value: str | None) -> clock_time | None:
    """Parse an HH:MM[:SS] string. Returns None if missing or malformed."""
    if not value or not isinstance(value, str) or not ISO_TIME.fullmatch(value):
        return None
    try:
        return clock_time.fromisoformat(value)
    except ValueError:
        return None


def parse_timestamp(value: str | None) -> datetime | None:
    """
    Parse an ISO timestamp to a naive local datetime.

    Aware timestamps are converted to local time so that mixed inputs compare.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


@dataclass(frozen=True)
class Task:
    """A task record as served by the todo API."""

    id: int
    title: str
    description: str
    date: str
    priority: Priority
    status: Status
    created_at: str
    updated_at: str
    time: str | None = None
    notify: Notify = Notify.NO
    completed_at: str | None = None

    @property
    def due_date(self) -> date | None:
        """Parsed due date, or None if the stored value is malformed."""
        return parse_iso_date(self.date)

    @property
    def time_of_day(self) -> clock_time | None:
        return parse_iso_time(self.time)

    @property
    def created(self) -> datetime | None:
        return parse_timestamp(self.created_at)

    @property
    def updated(self) -> datetime | None:
        return parse_timestamp(self.updated_at)

    @property
    def is_completed(self) -> bool:
        return self.status is Status.COMPLETED

    @property
    def is_all_day(self) -> bool:
        return self.time is None

    def days_until_due(self, as_of: date | None = None) -> int | None:
        """Days until due date (negative if overdue)."""
        due = self.due_date
        if due is None:
            return None
        as_of = as_of or date.today()
        return (due - as_of).days

    def format_time(self) -> str:
        """Format the time of day for display."""
        if self.is_all_day:
            return "All day"
        parsed = self.time_of_day
        if parsed is None:
            return self.time
        hour = parsed.hour % 12 or 12
        suffix = "AM" if parsed.hour < 12 else "PM"
        return f"{hour}:{parsed.minute:02d} {suffix}"

    @classmethod
    def from_api(cls, data: dict) -> "Task":
        """
        Create Task from a todo API response item.

        Raises ValueError for unknown priority/status/notify values and
        KeyError for missing required fields.
        """
        return cls(
            id=int(data["id"]),
            title=data.get("title") or "",
            description=data.get("description") or "",
            date=data["date"],
            time=data.get("time") or None,
            priority=Priority(data["priority"]),
            status=Status(data.get("status") or Status.PENDING.value),
            notify=Notify(data.get("notify") or Notify.NO.value),
            created_at=data.get("createdAt") or "",
            updated_at=data.get("updatedAt") or data.get("createdAt") or "",
            completed_at=data.get("completedAt") or None,
        )

    def to_api(self) -> dict:
        """Serialize back to the API's field names."""
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "priority": self.priority.value,
            "status": self.status.value,
            "notify": self.notify.value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if not self.is_all_day:
            data["time"] = self.time
        if self.completed_at is not None:
            data["completedAt"] = self.completed_at
        return data

    def to_request(self) -> dict:
        """Body for create/update requests (server-managed fields omitted)."""
        body = {
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "priority": self.priority.value,
            "notify": self.notify.value,
        }
        if not self.is_all_day:
            body["time"] = self.time
        return body
