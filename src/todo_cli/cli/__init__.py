"""Command-line interface for the todo list."""

from todo_cli.cli.app import TodoApp, cli, main

__all__ = ["TodoApp", "cli", "main"]
