"""File-based task storage adapter."""

import json
import logging
from dataclasses import replace
from datetime import datetime
from pathlib import Path

from taskdeck.core.snapshot import find_task, merge_task, remove_task
from taskdeck.core.tasks import Status, Task

logger = logging.getLogger(__name__)


class JsonFileTaskRepository:
    """
    JSON file task storage.

    Implements TaskRepository protocol. The file holds either a list of
    API-shaped task records or an API envelope with the list under "data".
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _read_records(self) -> list[dict]:
        if not self.path.exists():
            return []
        data = json.loads(self.path.read_text())
        if isinstance(data, dict):
            data = data.get("data") or []
        if not isinstance(data, list):
            raise ValueError(f"{self.path} does not hold a list of tasks")
        return data

    def _write(self, tasks: list[Task]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps([t.to_api() for t in tasks], indent=2))

    def _now(self) -> str:
        return datetime.now().replace(microsecond=0).isoformat()

    def fetch_all(self) -> list[Task]:
        """Load every task. Records with unknown enum values are skipped."""
        tasks = []
        for item in self._read_records():
            try:
                tasks.append(Task.from_api(item))
            except (KeyError, ValueError, TypeError) as e:
                logger.warning(f"Skipping malformed task record in {self.path.name}: {e}")
        return tasks

    def fetch_one(self, task_id: int) -> Task:
        task = find_task(self.fetch_all(), task_id)
        if task is None:
            raise KeyError(f"No task with id {task_id}")
        return task

    def create(self, task: Task) -> Task:
        tasks = self.fetch_all()
        now = self._now()
        created = replace(
            task,
            id=max((t.id for t in tasks), default=0) + 1,
            status=Status.PENDING,
            completed_at=None,
            created_at=now,
            updated_at=now,
        )
        self._write([*tasks, created])
        return created

    def update(self, task: Task) -> Task:
        tasks = self.fetch_all()
        current = find_task(tasks, task.id)
        if current is None:
            raise KeyError(f"No task with id {task.id}")
        updated = replace(
            current,
            title=task.title,
            description=task.description,
            date=task.date,
            time=task.time,
            priority=task.priority,
            notify=task.notify,
            updated_at=self._now(),
        )
        self._write(merge_task(tasks, updated))
        return updated

    def update_status(self, task_id: int, status: Status) -> Task:
        tasks = self.fetch_all()
        current = find_task(tasks, task_id)
        if current is None:
            raise KeyError(f"No task with id {task_id}")
        now = self._now()
        updated = replace(
            current,
            status=status,
            completed_at=now if status is Status.COMPLETED else None,
            updated_at=now,
        )
        self._write(merge_task(tasks, updated))
        return updated

    def delete(self, task_id: int) -> None:
        tasks = self.fetch_all()
        if find_task(tasks, task_id) is None:
            raise KeyError(f"No task with id {task_id}")
        self._write(remove_task(tasks, task_id))
