# tasktracker

A small command-line task tracker. The `tt` command keeps its tasks in
`tasks.json` in the current directory and creates an empty file there on
first use.

## Installation

```
pip install .
```

## Usage

```
tt add "Buy groceries"          # add a task, prints its id
tt update 0 "Buy groceries and milk"
tt mark-in-progress 0
tt mark-done 0
tt delete 0
tt list                         # all tasks
tt list todo                    # only tasks with a given status
tt list in-progress
tt list done
```

Every run first prints a welcome line. Running `tt` with no arguments then
prints a short usage line; an unknown operation prints the list of
supported ones. `tt list` prints the tasks as a fixed-width table, or
`There are not tasks.` when there are none.

Wrong arguments (a missing description, a non-numeric id, an id that does
not exist, an unknown status filter) and problems reading or writing the
task file are reported on standard error, and `tt` exits with status 1.

Every task carries an id, a description, a status (`todo`, `in-progress`
or `done`) and the times it was created and last updated, written as
`DD-MM-YYYY HH:MM:SS`. Both times are set when the task is added; updating
the description or the status does not change them.

A new task's id is the number of tasks already in the file, so after a
deletion a new task can receive an id that is already in use.

## Using it from Python

```python
from tasktracker.storage import TaskFile
from tasktracker.service import TaskService
from tasktracker.model import TaskStatus

store = TaskFile("tasks.json")
store.ensure_exists()
service = TaskService(store)

task_id = service.add("Write the report")
service.change_status(task_id, TaskStatus.IN_PROGRESS)
for task in service.list_filtered("in-progress"):
    print(task.id, task.description)
```

- `tasktracker.model` holds `Task`, `TaskStatus` and `task_from_dict`.
- `tasktracker.storage.TaskFile` reads and writes the JSON file. A missing
  id raises `TaskNotFoundError`; other file problems raise `TaskFileError`.
- `tasktracker.service.TaskService` adds, updates, deletes, lists and
  changes the status of tasks.
- `tasktracker.util` has `check_valid_status`, `format_tasks_table` and
  `print_tasks_table`.
- `tasktracker.manager` runs the command-line operations
  (`manage_operations` and one `manage_*` function per operation) and
  raises `OperationError` when its arguments are wrong.

## Running the tests

```
pip install ".[test]"
pytest
```