# src/todo_ledger/todos/todo_store.py

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from ..core.ports import Owner
from .todo_models import Todo, TodoStatistics

logger = logging.getLogger(__name__)

U64_MAX = 2**64 - 1


class BoundedTodoList:
    """
    Ordered, fixed-capacity sequence of todos.

    - insertion order is creation order
    - try_push() is a checked insert: it reports a full list instead of growing past capacity
    - remove() drops by id; other todos keep their ids and relative order
    """

    __slots__ = ("_capacity", "_items")

    def __init__(self, capacity: int, items: list[Todo] | None = None) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        items = list(items or [])
        if len(items) > capacity:
            raise ValueError(f"{len(items)} items exceed capacity {capacity}")
        self._capacity = capacity
        self._items = items

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Todo]:
        return iter(self._items)

    def __deepcopy__(self, memo: dict) -> BoundedTodoList:
        return BoundedTodoList(self._capacity, copy.deepcopy(self._items, memo))

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def try_push(self, todo: Todo) -> bool:
        if self.is_full():
            return False
        self._items.append(todo)
        return True

    def position(self, todo_id: int) -> int | None:
        for i, todo in enumerate(self._items):
            if todo.id == todo_id:
                return i
        return None

    def find(self, todo_id: int) -> Todo | None:
        pos = self.position(todo_id)
        return None if pos is None else self._items[pos]

    def remove(self, todo_id: int) -> Todo | None:
        pos = self.position(todo_id)
        if pos is None:
            return None
        return self._items.pop(pos)


class IdAllocator:
    """Per-owner id counter: strictly increasing, never reused after deletion."""

    __slots__ = ("_next",)

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("id counter cannot be negative")
        self._next = start

    def peek(self) -> int:
        return self._next

    def next(self) -> int:
        value = self._next
        if value > U64_MAX:
            raise OverflowError("todo id space exhausted")
        self._next = value + 1
        return value


@dataclass(slots=True)
class OwnerState:
    """Everything scoped to one owner: the list, its id counter, and the statistics cache."""

    todos: BoundedTodoList
    ids: IdAllocator
    stats: TodoStatistics = field(default_factory=TodoStatistics)


class TodoStore:
    """
    In-memory owner -> OwnerState mapping.

    The store never computes statistics and never emits events.
    Mutations go through a draft: snapshot(owner) -> mutate the copy -> commit(owner, draft).
    A draft that is never committed leaves the store untouched.
    """

    def __init__(self, *, capacity: int, id_base: int = 0) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if not 0 <= id_base <= U64_MAX:
            raise ValueError(f"id_base must be within 0..{U64_MAX}, got {id_base}")
        self._capacity = capacity
        self._id_base = id_base
        self._owners: dict[Owner, OwnerState] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def _new_state(self) -> OwnerState:
        return OwnerState(todos=BoundedTodoList(self._capacity), ids=IdAllocator(self._id_base))

    # ---- reads ----

    def owners(self) -> list[Owner]:
        return list(self._owners)

    def get(self, owner: Owner) -> tuple[Todo, ...]:
        state = self._owners.get(owner)
        if state is None:
            return ()
        return tuple(replace(t) for t in state.todos)

    def get_stats(self, owner: Owner) -> TodoStatistics:
        state = self._owners.get(owner)
        return state.stats if state is not None else TodoStatistics()

    def get_next_id(self, owner: Owner) -> int:
        state = self._owners.get(owner)
        return state.ids.peek() if state is not None else self._id_base

    # ---- transactional access ----

    def snapshot(self, owner: Owner) -> OwnerState:
        """Deep copy of the owner's state (a fresh empty state for unknown owners)."""
        state = self._owners.get(owner)
        if state is None:
            return self._new_state()
        return copy.deepcopy(state)

    def commit(self, owner: Owner, state: OwnerState) -> None:
        if state.todos.capacity != self._capacity:
            raise ValueError("draft capacity does not match store capacity")
        self._owners[owner] = state
        logger.debug("Committed owner=%r todos=%d next_id=%d", owner, len(state.todos), state.ids.peek())

    # ---- single-step helpers (no statistics, no events) ----

    def insert(self, owner: Owner, todo: Todo) -> bool:
        state = self._owners.setdefault(owner, self._new_state())
        return state.todos.try_push(todo)

    def remove(self, owner: Owner, todo_id: int) -> Todo | None:
        state = self._owners.get(owner)
        return None if state is None else state.todos.remove(todo_id)

    def find(self, owner: Owner, todo_id: int) -> Todo | None:
        state = self._owners.get(owner)
        return None if state is None else state.todos.find(todo_id)
