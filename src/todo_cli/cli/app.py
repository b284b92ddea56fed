"""Command-line interface for the todo list.

Usage:
    todo buy milk          # add a task
    todo check 1           # mark task 1 done
    todo undo 1            # mark it open again
    todo remove 1          # delete it
    todo cleanup           # delete all done tasks
    todo clear             # delete everything
    todo ls --all          # show done tasks too

Every command ends by printing the open tasks, except ``ls --all``
which prints the full list and stops.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console

from todo_cli import __version__
from todo_cli.cli.output import create_console, print_listing
from todo_cli.config import get_settings
from todo_cli.logging import Loggers, bind_context, configure_logging
from todo_cli.resolvers import PathResolver, TodoConfigError
from todo_cli.tasks.models import InvalidNoteError
from todo_cli.tasks.store import TaskList, TodoFileError

logger = Loggers.cli()

_FATAL_ERRORS = (TodoFileError, TodoConfigError, InvalidNoteError, ValidationError)


@contextmanager
def fatal_errors(command: str) -> Iterator[None]:
    """Turn domain errors into a click error (message on stderr, exit 1)."""
    try:
        yield
    except _FATAL_ERRORS as e:
        logger.error("command_failed", command=command, error=str(e))
        raise click.ClickException(str(e)) from e


@dataclass
class TodoApp:
    """Per-invocation state shared by all commands.

    Pass an instance as ``obj`` to substitute the console (e.g. a
    recording console in tests).
    """

    console: Console | None = None
    path: Path | None = None
    task_list: TaskList | None = None

    @property
    def todo(self) -> TaskList:
        """The task list, loaded from ``path`` on first use."""
        if self.task_list is None:
            if self.path is None:
                raise RuntimeError("Todo file not resolved")
            with fatal_errors("load"):
                self.task_list = TaskList.load(self.path)
        return self.task_list


class TodoGroup(click.Group):
    """Command group where words that are not a command name are a new task."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and not args[0].startswith("-") and self.get_command(ctx, args[0]) is None:
            return "add", self.get_command(ctx, "add"), args
        return super().resolve_command(ctx, args)


@click.group(cls=TodoGroup, invoke_without_command=True)
@click.option(
    "-f",
    "--file",
    "todo_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Todo file to use (default: ~/todo.txt, or TODO_FILE).",
)
@click.version_option(__version__, prog_name="todo")
@click.pass_context
def cli(ctx: click.Context, todo_file: Path | None) -> None:
    """CLI Todo-List Tool.

    Run with task text to add a task, e.g. `todo buy milk`.
    """
    app = ctx.ensure_object(TodoApp)
    with fatal_errors("configure"):
        settings = get_settings()
        configure_logging(settings)
        if app.console is None:
            app.console = create_console(settings)

        resolver = PathResolver.from_settings(settings)
        path = todo_file.expanduser() if todo_file is not None else resolver.resolve()
        bind_context(todo_file=str(path))
        app.path = path


@cli.result_callback()
@click.pass_obj
def print_unchecked(app: TodoApp, *args: object, **kwargs: object) -> None:
    print_listing(app.console, app.todo.print_unchecked())


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
def add(app: TodoApp, words: tuple[str, ...]) -> None:
    """Add a new task."""
    with fatal_errors("add"):
        app.todo.add(" ".join(words))


@cli.command()
@click.option("--all", "list_all", is_flag=True, help="List all tasks.")
@click.pass_context
def ls(ctx: click.Context, list_all: bool) -> None:
    """List unchecked tasks."""
    if list_all:
        app: TodoApp = ctx.obj
        print_listing(app.console, app.todo.print_all())
        # The full listing replaces the trailing unchecked listing
        ctx.exit(0)


@cli.command()
@click.argument("index", type=int)
@click.pass_obj
def remove(app: TodoApp, index: int) -> None:
    """Remove a task by index (ignored if out of range)."""
    with fatal_errors("remove"):
        app.todo.remove(index)


@cli.command()
@click.argument("index", type=int)
@click.pass_obj
def check(app: TodoApp, index: int) -> None:
    """Check a task by index (ignored if out of range)."""
    with fatal_errors("check"):
        app.todo.check(index)


@cli.command()
@click.argument("index", type=int)
@click.pass_obj
def undo(app: TodoApp, index: int) -> None:
    """Undo a task by index (ignored if out of range)."""
    with fatal_errors("undo"):
        app.todo.undo(index)


@cli.command()
@click.pass_obj
def cleanup(app: TodoApp) -> None:
    """Clear checked tasks."""
    with fatal_errors("cleanup"):
        app.todo.cleanup()


@cli.command()
@click.pass_obj
def clear(app: TodoApp) -> None:
    """Clear all tasks."""
    with fatal_errors("clear"):
        app.todo.clear()


def main() -> None:
    """Console script entry point."""
    cli(obj=TodoApp())
