"""Command-line entry point of the task tracker."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from tasktracker.manager import OperationError, manage_operations
from tasktracker.service import TaskService
from tasktracker.storage import TaskFile, TaskFileError


def main(argv: Sequence[str] | None = None) -> int:
    """Run the task tracker on ``argv``; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    print("Welcome to your Task Tracker")
    store = TaskFile()
    try:
        store.ensure_exists()
        manage_operations(list(argv), TaskService(store))
    except (OperationError, TaskFileError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())