"""Resolution of the todo file location.

Kept separate from the settings class so the home directory can be
injected in tests instead of read from the process environment.
"""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from todo_cli.config import TodoSettings


DEFAULT_TODO_FILENAME = "todo.txt"


class TodoConfigError(Exception):
    """Raised when the todo file location cannot be determined."""


class PathResolver:
    """Resolves the todo file path for the application."""

    def __init__(self, todo_file: Path | None = None, home: Path | None = None) -> None:
        """Initialize the path resolver.

        Args:
            todo_file: Explicitly configured todo file, if any
            home: Home directory override; defaults to the current user's
        """
        self._todo_file = todo_file
        self._home = home

    @classmethod
    def from_settings(cls, settings: "TodoSettings") -> "PathResolver":
        """Create a PathResolver from settings instance."""
        return cls(todo_file=settings.todo_file)

    @property
    def home_dir(self) -> Path:
        """The user's home directory.

        Raises:
            TodoConfigError: If the home directory cannot be determined.
        """
        if self._home is not None:
            return self._home
        try:
            return Path.home()
        except RuntimeError as e:
            raise TodoConfigError(f"Cannot determine home directory: {e}") from e

    def resolve(self) -> Path:
        """Return the configured todo file, or ``todo.txt`` in the home directory."""
        if self._todo_file is not None:
            return self._todo_file
        return self.home_dir / DEFAULT_TODO_FILENAME
