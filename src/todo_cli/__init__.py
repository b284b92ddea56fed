"""Todo CLI - a command-line todo list kept in a plain-text file.

The todo file holds one Markdown checkbox line per task:

    - [ ] buy milk
    - [x] write spec

It is rewritten in full after every change, so it can also be read and
edited by hand.

Note: the command-line interface lives in ``todo_cli.cli`` and is not
imported here, so the task model can be used without click.
"""

__version__ = "0.2.0"

from todo_cli.config import (
    SettingsContext,
    TodoSettings,
    get_settings,
    reload_settings,
    set_context_settings,
    set_settings,
)
from todo_cli.resolvers import PathResolver, TodoConfigError
from todo_cli.tasks import (
    InvalidNoteError,
    Outcome,
    Status,
    Task,
    TaskList,
    TaskParseError,
    TodoFileCorruptError,
    TodoFileError,
)

__all__ = [
    # Tasks
    "Task",
    "Status",
    "TaskList",
    "Outcome",
    # Errors
    "TaskParseError",
    "InvalidNoteError",
    "TodoFileError",
    "TodoFileCorruptError",
    "TodoConfigError",
    # Settings
    "TodoSettings",
    "SettingsContext",
    "get_settings",
    "set_settings",
    "set_context_settings",
    "reload_settings",
    "PathResolver",
]
