# src/todo_ledger/todos/todo_errors.py

"""
Error taxonomy of the todo engine.

All errors are caller-input errors: non-retriable, raised verbatim, never
recovered internally. A failed call leaves the owner's state untouched.
"""

from __future__ import annotations

from typing import Any


class TodoError(Exception):
    """Base class. `code` is a stable identifier suitable for rejection reasons."""

    code: str = "TodoError"

    def __init__(self, message: str, *, owner: Any = None) -> None:
        super().__init__(message)
        self.owner = owner


class TitleTooLong(TodoError):
    code = "TitleTooLong"

    def __init__(self, *, length: int, limit: int, owner: Any = None) -> None:
        super().__init__(f"Title is too long ({length} bytes, max {limit})", owner=owner)
        self.length = length
        self.limit = limit


class DescriptionTooLong(TodoError):
    code = "DescriptionTooLong"

    def __init__(self, *, length: int, limit: int, owner: Any = None) -> None:
        super().__init__(f"Description is too long ({length} bytes, max {limit})", owner=owner)
        self.length = length
        self.limit = limit


class TodoListFull(TodoError):
    code = "TodoListFull"

    def __init__(self, *, limit: int, owner: Any = None) -> None:
        super().__init__(f"Maximum number of todos reached ({limit})", owner=owner)
        self.limit = limit


class TodoNotFound(TodoError):
    code = "TodoNotFound"

    def __init__(self, *, todo_id: int, owner: Any = None) -> None:
        super().__init__(f"Todo not found: id={todo_id}", owner=owner)
        self.todo_id = todo_id
