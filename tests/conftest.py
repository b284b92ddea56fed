"""Shared test fixtures and utilities for todo-cli tests.

Provides:
- MockContext for isolating tests from global settings and TODO_* env vars
- Temporary todo file fixtures
- A recording console for CLI output
"""

import io
import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest
import structlog
from rich.console import Console

from todo_cli.config import TodoSettings, reload_settings, set_context_settings, set_settings
from todo_cli.logging import clear_context

TODO_ENV_VARS = ["TODO_FILE", "TODO_LOG_LEVEL", "TODO_LOG_FORMAT", "TODO_COLOR"]


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Resetting global settings singleton
    - Providing a temporary directory holding the todo file
    - Restoring TODO_* environment variables

    Usage:
        with MockContext() as ctx:
            todo = TaskList.load(ctx.todo_file)
    """

    def __init__(self, **settings_kwargs):
        self._settings_kwargs = settings_kwargs
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self._settings: TodoSettings | None = None
        self._original_env: dict[str, str | None] = {}

    def __enter__(self) -> "MockContext":
        self._temp_dir = tempfile.TemporaryDirectory()

        for var in TODO_ENV_VARS:
            self._original_env[var] = os.environ.pop(var, None)

        self._settings = TodoSettings(
            todo_file=self.todo_file,
            log_level="warning",
            color=False,
            **self._settings_kwargs,
        )
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        set_context_settings(None)

        for var, value in self._original_env.items():
            if value is None:
                os.environ.pop(var, None)
            else:
                os.environ[var] = value

        reload_settings()

        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def settings(self) -> TodoSettings:
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings

    @property
    def workspace_dir(self) -> Path:
        if self._temp_dir is None:
            raise RuntimeError("MockContext not entered")
        return Path(self._temp_dir.name)

    @property
    def todo_file(self) -> Path:
        return self.workspace_dir / "todo.txt"


def make_console() -> Console:
    """Console that records output as plain text instead of printing it."""
    return Console(
        file=io.StringIO(),
        record=True,
        no_color=True,
        highlight=False,
        soft_wrap=True,
        width=120,
    )


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo any structlog configuration done by the code under test."""
    yield
    clear_context()
    structlog.reset_defaults()


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated test context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def todo_path(tmp_path: Path) -> Path:
    """Path to a todo file that does not exist yet."""
    return tmp_path / "todo.txt"


@pytest.fixture
def console() -> Console:
    """Fixture providing a recording console."""
    return make_console()
