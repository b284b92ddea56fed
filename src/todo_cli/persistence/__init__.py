"""Persistence helpers for the todo file."""

from todo_cli.persistence._utils import atomic_write_text

__all__ = ["atomic_write_text"]
