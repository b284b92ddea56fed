"""Task model and the file-backed task list.

Example:
    >>> todo = TaskList.load(path)
    >>> todo.add("write spec")
    >>> todo.check(1)
    >>> todo.cleanup()
"""

from todo_cli.tasks.models import InvalidNoteError, Status, Task, TaskParseError
from todo_cli.tasks.store import (
    Outcome,
    TaskList,
    TaskListing,
    TodoFileCorruptError,
    TodoFileError,
)

__all__ = [
    "InvalidNoteError",
    "Outcome",
    "Status",
    "Task",
    "TaskList",
    "TaskListing",
    "TaskParseError",
    "TodoFileCorruptError",
    "TodoFileError",
]
