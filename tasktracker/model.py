"""Task records and their JSON representation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class TaskStatus(str, Enum):
    """The states a task can be in."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    def __str__(self) -> str:
        return self.value


def _parse_status(value: str) -> TaskStatus | str:
    try:
        return TaskStatus(value)
    except ValueError:
        return value


@dataclass
class Task:
    """A single tracked task."""

    id: int
    description: str = ""
    status: TaskStatus | str = TaskStatus.TODO
    created_at: str = ""
    updated_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the task as a JSON-ready mapping."""
        status = self.status.value if isinstance(self.status, TaskStatus) else self.status
        return {
            "id": self.id,
            "description": self.description,
            "status": status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


def task_from_dict(data: Mapping[str, Any]) -> Task:
    """Build a task from a decoded JSON object; missing fields take empty values."""
    if not isinstance(data, Mapping):
        raise ValueError("a task must be a JSON object")

    task_id = data.get("id")
    if task_id is None:
        task_id = 0
    if isinstance(task_id, bool) or not isinstance(task_id, int):
        raise ValueError(f"field 'id' must be an integer, got {task_id!r}")

    fields: dict[str, str] = {}
    for key in ("description", "status", "createdAt", "updatedAt"):
        value = data.get(key)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ValueError(f"field {key!r} must be a string, got {value!r}")
        fields[key] = value

    return Task(
        id=task_id,
        description=fields["description"],
        status=_parse_status(fields["status"]),
        created_at=fields["createdAt"],
        updated_at=fields["updatedAt"],
    )