"""Settings mixins for the todo file location and CLI output.

AppSettingsMixin: Application identity and the todo file location.
CLISettingsMixin: Logging and terminal display settings.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator


class AppSettingsMixin:
    """Settings for application identity and disk layout.

    Should be composed with BaseSettings via multiple inheritance.
    """

    app_name: str = Field(
        default="todo",
        title="App Name",
        description="Application name, also used for the config directory (~/.todo)",
    )

    # None means "todo.txt in the home directory", resolved by PathResolver.
    # The alias makes the env var TODO_FILE rather than TODO_TODO_FILE.
    todo_file: Path | None = Field(
        default=None,
        validation_alias="todo_file",
        title="Todo File",
        description="Location of the todo file",
    )

    @field_validator("todo_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path | None) -> Path | None:
        """Expand ~ in paths."""
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v


class CLISettingsMixin:
    """Settings for CLI/UI configuration.

    Note: This is a mixin, not a BaseSettings subclass, to avoid
    MRO issues when composed with other settings classes.
    """

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for humans, json for tooling)",
    )

    color: bool = Field(
        default=True,
        title="Color",
        description="Colorize task listings and console logs",
    )
