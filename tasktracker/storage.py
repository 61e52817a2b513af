"""Persistence of tasks in a JSON file."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from pathlib import Path

from tasktracker.model import Task, TaskStatus, task_from_dict

DEFAULT_FILE_NAME = "tasks.json"


class TaskFileError(Exception):
    """The task file could not be created, read or written."""


class TaskNotFoundError(TaskFileError, LookupError):
    """No task carries the requested id."""

    def __init__(self, task_id: int) -> None:
        super().__init__("id not found")
        self.task_id = task_id


class TaskFile:
    """A JSON file holding the list of tasks."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_FILE_NAME) -> None:
        self.path = Path(path)

    def ensure_exists(self) -> None:
        """Create an empty task file if there is none."""
        if self.path.exists():
            return
        try:
            self.path.touch()
        except OSError as exc:
            raise TaskFileError(f"couldn't create file: {exc}") from exc

    def load(self) -> list[Task]:
        """Read every task from the file; an empty file holds no tasks."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TaskFileError(f"impossible to open the file: {exc}") from exc
        if not text:
            return []
        try:
            raw = json.loads(text)
            if raw is None:
                return []
            if not isinstance(raw, list):
                raise ValueError("expected a JSON array of tasks")
            return [task_from_dict(item) for item in raw]
        except ValueError as exc:
            raise TaskFileError(f"failed to unmarshal json file into tasks: {exc}") from exc

    def load_filtered(self, status: TaskStatus | str) -> list[Task]:
        """Read the tasks whose status equals ``status``."""
        return [task for task in self.load() if task.status == status]

    def save(self, tasks: Iterable[Task]) -> None:
        """Replace the file's contents with ``tasks``."""
        payload = json.dumps([task.to_dict() for task in tasks], indent=1, ensure_ascii=False)
        try:
            with self.path.open("r+", encoding="utf-8") as handle:
                handle.truncate(0)
                handle.seek(0)
                handle.write(payload)
        except OSError as exc:
            raise TaskFileError(f"impossible to write the file: {exc}") from exc

    @staticmethod
    def _find(tasks: list[Task], task_id: int) -> Task:
        for task in tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def update_description(self, task_id: int, description: str) -> None:
        """Set a new description on the task with ``task_id``."""
        tasks = self.load()
        self._find(tasks, task_id).description = description
        self.save(tasks)

    def delete(self, task_id: int) -> None:
        """Remove the task with ``task_id``."""
        tasks = self.load()
        remaining = [task for task in tasks if task.id != task_id]
        if len(remaining) == len(tasks):
            raise TaskNotFoundError(task_id)
        self.save(remaining)

    def change_status(self, task_id: int, status: TaskStatus | str) -> None:
        """Set the status of the task with ``task_id``."""
        tasks = self.load()
        self._find(tasks, task_id).status = status
        self.save(tasks)