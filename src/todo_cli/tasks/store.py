"""File-backed task list.

The todo file is both the storage format and something users edit by
hand, so loading is strict: a single malformed line aborts the load
instead of being skipped. Every mutation rewrites the whole file.

Concurrent invocations against the same file are not coordinated; the
last writer wins.

Example:
    >>> todo = TaskList.load(Path("~/todo.txt").expanduser())
    >>> todo.add("buy milk")
    >>> todo.check(1)
    >>> for line in todo.print_unchecked():
    ...     console.print(line)
"""

from collections.abc import Callable, Iterator
from enum import Enum
from pathlib import Path

from rich.text import Text

from todo_cli.logging import Loggers
from todo_cli.persistence import atomic_write_text
from todo_cli.tasks.models import Task, TaskParseError

logger = Loggers.store()


class Outcome(Enum):
    """Result of a mutating operation."""

    APPLIED = "applied"
    INDEX_OUT_OF_RANGE = "index_out_of_range"


class TodoFileError(Exception):
    """Raised when the todo file cannot be read, created or written."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class TodoFileCorruptError(TodoFileError):
    """Raised when a line of the todo file is not a valid task line."""

    def __init__(
        self, path: Path, line_number: int, line: str, reason: str = "Failed to parse"
    ) -> None:
        super().__init__(f"{reason} line {line_number} of {path}: {line!r}", path)
        self.line_number = line_number
        self.line = line


class TaskListing:
    """Numbered, optionally filtered view over a task list.

    Iterating yields one rich ``Text`` per shown task, formatted as
    `` <n>. <glyph> <note>`` where ``n`` is the task's position in the
    full list. Each iteration starts over from the first task.
    """

    def __init__(
        self,
        tasks: list[Task],
        predicate: Callable[[Task], bool] | None = None,
    ) -> None:
        self._tasks = tasks
        self._predicate = predicate

    def __iter__(self) -> Iterator[Text]:
        for number, task in enumerate(self._tasks, start=1):
            if self._predicate is not None and not self._predicate(task):
                continue
            yield Text.assemble(" ", (f"{number}.", "dim"), " ", task.display())


class TaskList:
    """Ordered list of tasks persisted to a plain-text file.

    Indices taken by ``check``, ``undo`` and ``remove`` are 1-based
    positions in the full list. An index outside ``[1, len]`` is not an
    error: nothing changes, nothing is written, and the call returns
    ``Outcome.INDEX_OUT_OF_RANGE``.
    """

    def __init__(self, path: Path, tasks: list[Task] | None = None) -> None:
        self._path = path
        self._tasks: list[Task] = list(tasks) if tasks else []

    @classmethod
    def load(cls, path: Path) -> "TaskList":
        """Load the task list from ``path``, creating an empty file if needed.

        Blank lines are ignored.

        Raises:
            TodoFileError: If the file cannot be created or read.
            TodoFileCorruptError: If any non-blank line is not a task line or
                is not valid UTF-8.
        """
        try:
            if not path.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                path.touch()
                logger.info("todo_file_created", path=str(path))
            raw = path.read_bytes()
        except OSError as e:
            raise TodoFileError(f"Cannot open todo file {path}: {e}", path) from e

        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            line_number = raw.count(b"\n", 0, e.start) + 1
            line = raw.split(b"\n")[line_number - 1].decode("utf-8", errors="replace")
            raise TodoFileCorruptError(
                path, line_number, line, reason="Invalid UTF-8 on"
            ) from None

        tasks: list[Task] = []
        for line_number, line in enumerate(content.split("\n"), start=1):
            line = line.removesuffix("\r")
            if not line.strip():
                continue
            try:
                tasks.append(Task.parse(line))
            except TaskParseError:
                raise TodoFileCorruptError(path, line_number, line) from None

        logger.debug("task_list_loaded", path=str(path), task_count=len(tasks))
        return cls(path, tasks)

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the tasks in list order."""
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def save(self) -> None:
        """Rewrite the whole backing file from the in-memory list.

        Raises:
            TodoFileError: If the file cannot be written.
        """
        content = "".join(f"{task.render()}\n" for task in self._tasks)
        try:
            atomic_write_text(self._path, content)
        except OSError as e:
            raise TodoFileError(
                f"Cannot write todo file {self._path}: {e}", self._path
            ) from e
        logger.debug("task_list_saved", path=str(self._path), task_count=len(self._tasks))

    def _position(self, index: int) -> int | None:
        if 1 <= index <= len(self._tasks):
            return index - 1
        logger.info("index_out_of_range", index=index, task_count=len(self._tasks))
        return None

    def _replace(self, index: int, transition: Callable[[Task], Task]) -> Outcome:
        position = self._position(index)
        if position is None:
            return Outcome.INDEX_OUT_OF_RANGE
        self._tasks[position] = transition(self._tasks[position])
        self.save()
        return Outcome.APPLIED

    def add(self, note: str) -> Outcome:
        """Append a new open task and save.

        Raises:
            InvalidNoteError: If the note contains a line break.
        """
        task = Task.new(note)
        self._tasks.append(task)
        self.save()
        logger.info("task_added", index=len(self._tasks))
        return Outcome.APPLIED

    def check(self, index: int) -> Outcome:
        """Mark the task at ``index`` as done."""
        return self._replace(index, Task.check)

    def undo(self, index: int) -> Outcome:
        """Mark the task at ``index`` as open again."""
        return self._replace(index, Task.undo)

    def remove(self, index: int) -> Outcome:
        """Delete the task at ``index``; later tasks move up by one."""
        position = self._position(index)
        if position is None:
            return Outcome.INDEX_OUT_OF_RANGE
        del self._tasks[position]
        self.save()
        return Outcome.APPLIED

    def cleanup(self) -> Outcome:
        """Remove every done task, keeping the others in order."""
        self._tasks[:] = [task for task in self._tasks if not task.is_done]
        self.save()
        return Outcome.APPLIED

    def clear(self) -> Outcome:
        """Remove all tasks."""
        self._tasks.clear()
        self.save()
        return Outcome.APPLIED

    def print_unchecked(self) -> TaskListing:
        """Numbered listing of the open tasks."""
        return TaskListing(self._tasks, lambda task: not task.is_done)

    def print_all(self) -> TaskListing:
        """Numbered listing of every task."""
        return TaskListing(self._tasks)
