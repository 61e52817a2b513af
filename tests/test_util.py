import pytest

from tasktracker.model import Task, TaskStatus
from tasktracker.util import check_valid_status, format_tasks_table, print_tasks_table

SEPARATOR = (
    "-----+------------------------------------------+--------------+"
    "----------------------+----------------------"
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("done", True),
        ("todo", True),
        ("in-progress", True),
        ("invalid", False),
        ("", False),
    ],
)
def test_check_valid_status(value, expected):
    assert check_valid_status(value) is expected


def test_format_empty():
    assert format_tasks_table([]) == "There are not tasks."


def test_format_table_layout():
    tasks = [
        Task(7, "A", TaskStatus.TODO, "01-01-2024 10:00:00", "01-01-2024 10:00:00"),
        Task(8, "B", TaskStatus.DONE, "02-01-2024 10:00:00", "02-01-2024 11:00:00"),
    ]
    lines = format_tasks_table(tasks).split("\n")
    assert len(lines) == 4
    assert lines[0].startswith("ID   | Description ")
    assert lines[1] == SEPARATOR
    assert lines[2].startswith("7    | A ")
    assert "| todo " in lines[2]
    assert "| done " in lines[3]
    assert len(lines[0]) == len(lines[2]) == len(lines[3])


def test_long_description_not_truncated():
    description = "x" * 60
    table = format_tasks_table([Task(1, description, TaskStatus.TODO, "", "")])
    assert description in table


def test_print_tasks_table(capsys):
    print_tasks_table([])
    assert capsys.readouterr().out == "There are not tasks.\n"


def test_print_tasks_table_with_rows(capsys):
    tasks = [Task(1, "read book", TaskStatus.IN_PROGRESS, "c", "u")]
    print_tasks_table(tasks)
    out = capsys.readouterr().out
    assert out == format_tasks_table(tasks) + "\n"
    assert "read book" in out