"""Status checks and table output for tasks."""

from __future__ import annotations

from collections.abc import Iterable

from tasktracker.model import Task, TaskStatus

STATES = frozenset(status.value for status in TaskStatus)

_SEPARATOR = (
    "-----+------------------------------------------+--------------+"
    "----------------------+----------------------"
)
_EMPTY_MESSAGE = "There are not tasks."


def check_valid_status(value: str) -> bool:
    """Tell whether ``value`` names a known task status."""
    return value in STATES


def _row(task_id: object, description: object, status: object, created: object, updated: object) -> str:
    return f"{task_id!s:<4} | {description!s:<40} | {status!s:<12} | {created!s:<20} | {updated!s:<20}"


def format_tasks_table(tasks: Iterable[Task]) -> str:
    """Render tasks as a fixed-width table, or a notice when there are none."""
    tasks = list(tasks)
    if not tasks:
        return _EMPTY_MESSAGE
    lines = [
        _row("ID", "Description", "Status", "Created At", "Updated At"),
        _SEPARATOR,
    ]
    lines.extend(
        _row(task.id, task.description, task.status, task.created_at, task.updated_at)
        for task in tasks
    )
    return "\n".join(lines)


def print_tasks_table(tasks: Iterable[Task]) -> None:
    """Print the table produced by :func:`format_tasks_table`."""
    print(format_tasks_table(tasks))