"""Task repository interface."""

from typing import Protocol

from taskdeck.core.tasks import Status, Task


class TaskRepository(Protocol):
    """Interface for fetching and mutating tasks on any backend."""

    def fetch_all(self) -> list[Task]:
        """Fetch the full snapshot, in server order."""
        ...

    def fetch_one(self, task_id: int) -> Task:
        """Fetch a single task."""
        ...

    def create(self, task: Task) -> Task:
        """Create a task. Returns the stored record (with its assigned id)."""
        ...

    def update(self, task: Task) -> Task:
        """Replace a task's editable fields."""
        ...

    def update_status(self, task_id: int, status: Status) -> Task:
        """Change a task's status."""
        ...

    def delete(self, task_id: int) -> None:
        """Delete a task."""
        ...
