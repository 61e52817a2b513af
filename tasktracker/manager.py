"""Dispatch of command-line operations to the task service."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from tasktracker.model import TaskStatus
from tasktracker.service import TaskService
from tasktracker.storage import TaskFile, TaskNotFoundError
from tasktracker.util import check_valid_status, print_tasks_table

ADD = "add"
UPDATE = "update"
DELETE = "delete"
MARK_IN_PROGRESS = "mark-in-progress"
MARK_DONE = "mark-done"
LIST = "list"

USAGE = "Usage: tt [add|update|delete|mark-in-progress|mark-done|list] [args]"

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class OperationError(Exception):
    """An operation was requested with bad arguments or could not be carried out."""


def _parse_id(text: str) -> int:
    if not _ID_PATTERN.fullmatch(text):
        raise OperationError("the id must to be numeric")
    return int(text)


def _missing(task_id: int) -> OperationError:
    return OperationError(f"does not exist task with ID:{task_id}")


def manage_add(args: Sequence[str], service) -> None:
    """Add a task whose description is ``args[1]``."""
    if len(args) == 1:
        raise OperationError("description not provided")
    description = args[1]
    task_id = service.add(description)
    print(
        f"the task with description {description} has been successfully saved. "
        f"The id is :{task_id}"
    )


def manage_update(args: Sequence[str], service) -> None:
    """Replace the description of task ``args[1]`` with ``args[2]``."""
    if len(args) != 3:
        raise OperationError("update operation must to have {update {id} 'new description'}")
    task_id = _parse_id(args[1])
    description = args[2]
    try:
        service.update(task_id, description)
    except TaskNotFoundError as exc:
        raise _missing(task_id) from exc
    print(f"the task with ID {task_id} has been updated. The new description is {description}.")


def manage_delete(args: Sequence[str], service) -> None:
    """Delete task ``args[1]``."""
    if len(args) != 2:
        raise OperationError("delete operation must to have {delete {id}}")
    task_id = _parse_id(args[1])
    try:
        service.delete(task_id)
    except TaskNotFoundError as exc:
        raise _missing(task_id) from exc
    print(f"the task with ID {task_id} has been deleted.")


def manage_change_status(args: Sequence[str], status: TaskStatus | str, service) -> None:
    """Set the status of task ``args[1]`` to ``status``."""
    if len(args) == 1:
        raise OperationError("id not provided")
    task_id = _parse_id(args[1])
    try:
        service.change_status(task_id, status)
    except TaskNotFoundError as exc:
        raise _missing(task_id) from exc
    print(f"the task with ID {task_id} has been updated to state {status}.")


def manage_list(args: Sequence[str], service) -> None:
    """Print all tasks, or those with the status named in ``args[1]``."""
    if len(args) > 2:
        raise OperationError("we only support 'list', 'list done', 'list todo', 'list in-progress'")
    if len(args) == 1:
        tasks = service.list_all()
    else:
        status = args[1]
        if not check_valid_status(status):
            raise OperationError("we only support 'done', 'todo', 'in-progress'")
        tasks = service.list_filtered(status)
    print_tasks_table(tasks)


def _handlers() -> dict[str, Callable[[Sequence[str], object], None]]:
    return {
        ADD: manage_add,
        UPDATE: manage_update,
        DELETE: manage_delete,
        MARK_IN_PROGRESS: lambda args, svc: manage_change_status(args, TaskStatus.IN_PROGRESS, svc),
        MARK_DONE: lambda args, svc: manage_change_status(args, TaskStatus.DONE, svc),
        LIST: manage_list,
    }


def manage_operations(args: Sequence[str], service=None) -> None:
    """Run the operation named by ``args[0]`` with the remaining arguments."""
    if service is None:
        service = TaskService(TaskFile())
    args = list(args)
    if not args:
        print(USAGE)
        return
    handler = _handlers().get(args[0])
    if handler is None:
        print(
            f"Don't support the operation < {args[0]} >. Only support add, update, "
            "delete, mark-in-progress, mark-done and list."
        )
        return
    handler(args, service)