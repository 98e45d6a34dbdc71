# src/todo_ledger/todos/todo_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Final


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: Priority | str) -> Priority:
        """Accept a Priority or a case-insensitive name ("low", "Medium", "HIGH")."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise TypeError(f"priority must be Priority or str, got {type(raw).__name__}")
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"unknown priority: {raw!r}") from None


@dataclass(slots=True)
class Todo:
    id: int
    title: str
    description: str
    priority: Priority
    created_at: int
    updated_at: int
    completed: bool = False
    completed_at: int | None = None

    @property
    def is_high_priority_open(self) -> bool:
        return self.priority is Priority.HIGH and not self.completed


@dataclass(slots=True, frozen=True)
class TodoStatistics:
    """
    Summary of one owner's list.

    `pending` is derived, never stored independently, so total == completed + pending holds.
    """

    total: int = 0
    completed: int = 0
    high_priority: int = 0

    @property
    def pending(self) -> int:
        return self.total - self.completed


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset.UNSET


@dataclass(slots=True, frozen=True)
class TodoPatch:
    """
    Partial update. A field left as UNSET keeps its current value.

    The whole patch is validated before any field is applied.
    """

    title: str | bytes | _Unset = UNSET
    description: str | bytes | _Unset = UNSET
    priority: Priority | str | _Unset = UNSET

    def is_empty(self) -> bool:
        return self.title is UNSET and self.description is UNSET and self.priority is UNSET


class TodoFilter(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    DONE = "done"

    def matches(self, todo: Todo) -> bool:
        if self is TodoFilter.ACTIVE:
            return not todo.completed
        if self is TodoFilter.DONE:
            return todo.completed
        return True
