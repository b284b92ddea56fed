"""Terminal output for task listings."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from todo_cli.config import TodoSettings


def create_console(settings: "TodoSettings | None" = None) -> Console:
    """Create the console used for listings.

    Color is turned off when ``settings.color`` is false; rich also
    honours the NO_COLOR environment variable on its own.
    """
    color = settings.color if settings is not None else True
    return Console(
        highlight=False,
        no_color=None if color else True,
        soft_wrap=True,
    )


def print_listing(console: Console, lines: Iterable[Text]) -> None:
    """Print each listing line on its own row."""
    for line in lines:
        console.print(line)
