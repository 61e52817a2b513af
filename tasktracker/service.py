"""Operations on tasks backed by a task file."""

from __future__ import annotations

from datetime import datetime

from tasktracker.model import Task, TaskStatus
from tasktracker.storage import TaskFile

DATE_FORMAT = "%d-%m-%Y %H:%M:%S"


class TaskService:
    """Adds, changes, removes and lists tasks kept in a :class:`TaskFile`."""

    def __init__(self, store: TaskFile) -> None:
        self.store = store

    def add(self, description: str) -> int:
        """Store a new to-do task and return its id."""
        tasks = self.store.load()
        task_id = len(tasks)
        now = datetime.now().strftime(DATE_FORMAT)
        tasks.append(Task(task_id, description, TaskStatus.TODO, now, now))
        self.store.save(tasks)
        return task_id

    def update(self, task_id: int, description: str) -> None:
        """Change the description of a task."""
        self.store.update_description(task_id, description)

    def delete(self, task_id: int) -> None:
        """Remove a task."""
        self.store.delete(task_id)

    def list_all(self) -> list[Task]:
        """Return every task."""
        return self.store.load()

    def list_filtered(self, status: TaskStatus | str) -> list[Task]:
        """Return the tasks with the given status."""
        return self.store.load_filtered(status)

    def change_status(self, task_id: int, status: TaskStatus | str) -> None:
        """Change the status of a task."""
        self.store.change_status(task_id, status)