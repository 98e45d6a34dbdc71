# src/todo_ledger/todos/todo_stats.py

from __future__ import annotations

from collections.abc import Iterable

from .todo_models import Todo, TodoStatistics


def compute_statistics(todos: Iterable[Todo]) -> TodoStatistics:
    """
    Recompute statistics from scratch with one linear scan.

    Pure: the same list always yields the same result. Called after every
    successful mutation so the cached copy never drifts from the list.
    """
    total = 0
    completed = 0
    high_priority = 0
    for todo in todos:
        total += 1
        if todo.completed:
            completed += 1
        elif todo.is_high_priority_open:
            high_priority += 1
    return TodoStatistics(total=total, completed=completed, high_priority=high_priority)
