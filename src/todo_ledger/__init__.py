"""Per-owner bounded todo lists with deterministic, event-audited mutations."""

from .todos.todo_engine import TodoEngine
from .todos.todo_errors import (
    DescriptionTooLong,
    TitleTooLong,
    TodoError,
    TodoListFull,
    TodoNotFound,
)
from .todos.todo_models import UNSET, Priority, Todo, TodoPatch, TodoStatistics

__all__ = [
    "UNSET",
    "DescriptionTooLong",
    "Priority",
    "TitleTooLong",
    "Todo",
    "TodoEngine",
    "TodoError",
    "TodoListFull",
    "TodoNotFound",
    "TodoPatch",
    "TodoStatistics",
]
