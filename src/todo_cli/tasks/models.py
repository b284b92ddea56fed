"""Task record and its line format.

Each task is stored as one Markdown checkbox line:

    - [ ] buy milk
    - [x] write spec

Example:
    >>> task = Task.new("buy milk")
    >>> task.render()
    '- [ ] buy milk'
    >>> Task.parse("- [x] buy milk") == task.check()
    True
"""

import re
from dataclasses import dataclass
from enum import Enum

from rich.text import Text


class Status(Enum):
    """Status values for a task, keyed by their checkbox character."""

    TODO = " "
    DONE = "x"


# Glyph and style used for terminal display
STATUS_ICONS = {
    Status.DONE: ("✓", "green"),
    Status.TODO: ("✖", "red"),
}

_LINE_RE = re.compile(r"- \[(.)\] (.*)")
_LINE_BREAKS = ("\n", "\r")


class TaskParseError(ValueError):
    """Raised when a line does not match the task line format."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Not a task line: {line!r}")
        self.line = line


class InvalidNoteError(ValueError):
    """Raised when a note cannot be stored on a single line."""


@dataclass(frozen=True)
class Task:
    """A single todo entry.

    Attributes:
        status: Whether the task is still open or already checked.
        note: Free text, without line breaks.
    """

    status: Status
    note: str

    @classmethod
    def new(cls, note: str) -> "Task":
        """Create an open task.

        Raises:
            InvalidNoteError: If the note contains a line break.
        """
        if any(ch in note for ch in _LINE_BREAKS):
            raise InvalidNoteError("Task note must fit on a single line")
        return cls(status=Status.TODO, note=note)

    @property
    def is_done(self) -> bool:
        return self.status is Status.DONE

    def check(self) -> "Task":
        """Return the task marked done (unchanged if already done)."""
        if self.is_done:
            return self
        return Task(status=Status.DONE, note=self.note)

    def undo(self) -> "Task":
        """Return the task marked open again (unchanged if already open)."""
        if not self.is_done:
            return self
        return Task(status=Status.TODO, note=self.note)

    @classmethod
    def parse(cls, line: str) -> "Task":
        """Parse a ``- [ ] note`` / ``- [x] note`` line.

        The note is everything after the checkbox and its following space,
        kept verbatim (it may be empty).

        Raises:
            TaskParseError: If the line is not a task line.
        """
        match = _LINE_RE.fullmatch(line)
        if match is None:
            raise TaskParseError(line)
        try:
            status = Status(match.group(1))
        except ValueError:
            raise TaskParseError(line) from None
        return cls(status=status, note=match.group(2))

    def render(self) -> str:
        """Render the task as its on-disk line (without line terminator)."""
        return f"- [{self.status.value}] {self.note}"

    def display(self) -> Text:
        """Terminal form: a colored status glyph followed by the note."""
        icon, style = STATUS_ICONS[self.status]
        return Text.assemble((icon, style), " ", self.note)
