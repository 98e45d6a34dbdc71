# src/todo_ledger/todos/todo_engine.py

from __future__ import annotations

"""
Mutation engine.

Every operation follows the same sequence on one owner's state:
  validate -> draft (copy) -> mutate draft -> recompute statistics -> commit -> emit event

Nothing is committed and nothing is emitted unless every step succeeded, so a
failed call leaves the list, the id counter and the statistics cache unchanged.
The engine assumes calls are serialized by the caller (single writer, no locks).
"""

import logging
from dataclasses import replace
from typing import Any

from ..core.ports import Clock, EventSink, Owner
from .todo_errors import DescriptionTooLong, TitleTooLong, TodoListFull, TodoNotFound
from .todo_events import EventLog, TodoCompletionToggled, TodoCreated, TodoDeleted, TodoUpdated
from .todo_models import UNSET, Priority, Todo, TodoFilter, TodoPatch, TodoStatistics
from .todo_stats import compute_statistics
from .todo_store import OwnerState, TodoStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_TITLE_LENGTH = 100
DEFAULT_MAX_DESCRIPTION_LENGTH = 500
DEFAULT_MAX_TODOS_PER_OWNER = 50


def _as_text(value: str | bytes, field_name: str) -> tuple[str, int]:
    """Return (text, UTF-8 byte length). Bytes must be valid UTF-8."""
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8"), len(value)
        except UnicodeDecodeError as e:
            raise ValueError(f"{field_name} is not valid UTF-8") from e
    if isinstance(value, str):
        return value, len(value.encode("utf-8"))
    raise TypeError(f"{field_name} must be str or bytes, got {type(value).__name__}")


def _limit(settings: Any, name: str, default: int) -> int:
    value = int(getattr(settings, name, default))
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


class TodoEngine:
    """Create/update/toggle/delete todos for many owners under hard limits."""

    def __init__(
        self,
        settings: Any,
        *,
        clock: Clock,
        events: EventSink,
        event_log: EventLog | None = None,
    ) -> None:
        self.max_title_length = _limit(settings, "max_title_length", DEFAULT_MAX_TITLE_LENGTH)
        self.max_description_length = _limit(
            settings, "max_description_length", DEFAULT_MAX_DESCRIPTION_LENGTH
        )
        self.max_todos_per_owner = _limit(
            settings, "max_todos_per_owner", DEFAULT_MAX_TODOS_PER_OWNER
        )
        id_base = int(getattr(settings, "id_base", 0))

        self._clock = clock
        self._events = events
        # Readable audit trail, when the wiring feeds one from `events`.
        self.event_log = event_log
        self._store = TodoStore(capacity=self.max_todos_per_owner, id_base=id_base)
        logger.debug(
            "TodoEngine ready max_title=%d max_description=%d max_todos=%d id_base=%d",
            self.max_title_length,
            self.max_description_length,
            self.max_todos_per_owner,
            id_base,
        )

    # ---- validation ----

    def _check_title(self, owner: Owner, value: str | bytes) -> str:
        title, n = _as_text(value, "title")
        if n > self.max_title_length:
            raise TitleTooLong(length=n, limit=self.max_title_length, owner=owner)
        return title

    def _check_description(self, owner: Owner, value: str | bytes) -> str:
        description, n = _as_text(value, "description")
        if n > self.max_description_length:
            raise DescriptionTooLong(length=n, limit=self.max_description_length, owner=owner)
        return description

    @staticmethod
    def _locate(draft: OwnerState, owner: Owner, todo_id: int) -> Todo:
        todo = draft.todos.find(todo_id)
        if todo is None:
            raise TodoNotFound(todo_id=todo_id, owner=owner)
        return todo

    def _commit(self, owner: Owner, draft: OwnerState, event: Any) -> None:
        draft.stats = compute_statistics(draft.todos)
        self._store.commit(owner, draft)
        self._events.emit(event)

    # ---- mutations ----

    def create_todo(
        self,
        owner: Owner,
        title: str | bytes,
        description: str | bytes,
        priority: Priority | str = Priority.MEDIUM,
    ) -> Todo:
        # Length checks come before the capacity check.
        clean_title = self._check_title(owner, title)
        clean_description = self._check_description(owner, description)
        prio = Priority.parse(priority)

        now = self._clock.now()
        draft = self._store.snapshot(owner)
        todo = Todo(
            id=draft.ids.next(),
            title=clean_title,
            description=clean_description,
            priority=prio,
            created_at=now,
            updated_at=now,
        )
        if not draft.todos.try_push(todo):
            raise TodoListFull(limit=self.max_todos_per_owner, owner=owner)

        self._commit(owner, draft, TodoCreated(owner=owner, id=todo.id))
        logger.debug("create_todo owner=%r id=%s priority=%s", owner, todo.id, prio.value)
        return replace(todo)

    def update_todo(
        self,
        owner: Owner,
        todo_id: int,
        patch: TodoPatch | None = None,
        **fields: Any,
    ) -> Todo:
        """
        Apply a partial update. Pass either a TodoPatch or keyword fields
        (title=, description=, priority=); None in a keyword means "leave unchanged".

        All provided fields are validated before any of them is applied.
        """
        if patch is None:
            unknown = set(fields) - {"title", "description", "priority"}
            if unknown:
                raise TypeError(f"unexpected fields: {', '.join(sorted(unknown))}")
            patch = TodoPatch(**{k: v for k, v in fields.items() if v is not None})
        elif fields:
            raise TypeError("pass either a TodoPatch or keyword fields, not both")

        draft = self._store.snapshot(owner)
        todo = self._locate(draft, owner, todo_id)

        new_title = UNSET if patch.title is UNSET else self._check_title(owner, patch.title)
        new_description = (
            UNSET
            if patch.description is UNSET
            else self._check_description(owner, patch.description)
        )
        new_priority = UNSET if patch.priority is UNSET else Priority.parse(patch.priority)

        now = self._clock.now()
        if new_title is not UNSET:
            todo.title = new_title
        if new_description is not UNSET:
            todo.description = new_description
        if new_priority is not UNSET:
            todo.priority = new_priority
        todo.updated_at = now

        self._commit(owner, draft, TodoUpdated(owner=owner, id=todo_id))
        logger.debug("update_todo owner=%r id=%s empty_patch=%s", owner, todo_id, patch.is_empty())
        return replace(todo)

    def toggle_todo_completion(self, owner: Owner, todo_id: int) -> Todo:
        draft = self._store.snapshot(owner)
        todo = self._locate(draft, owner, todo_id)

        now = self._clock.now()
        todo.completed = not todo.completed
        todo.completed_at = now if todo.completed else None
        todo.updated_at = now

        self._commit(
            owner,
            draft,
            TodoCompletionToggled(owner=owner, id=todo_id, completed=todo.completed),
        )
        logger.debug("toggle_todo_completion owner=%r id=%s completed=%s", owner, todo_id, todo.completed)
        return replace(todo)

    def delete_todo(self, owner: Owner, todo_id: int) -> Todo:
        draft = self._store.snapshot(owner)
        removed = draft.todos.remove(todo_id)
        if removed is None:
            raise TodoNotFound(todo_id=todo_id, owner=owner)

        self._commit(owner, draft, TodoDeleted(owner=owner, id=todo_id))
        logger.debug("delete_todo owner=%r id=%s remaining=%d", owner, todo_id, len(draft.todos))
        return removed

    # ---- reads (no side effects) ----

    def get_todos(self, owner: Owner) -> tuple[Todo, ...]:
        return self._store.get(owner)

    def get_todo(self, owner: Owner, todo_id: int) -> Todo:
        todo = self._store.find(owner, todo_id)
        if todo is None:
            raise TodoNotFound(todo_id=todo_id, owner=owner)
        return replace(todo)

    def list_todos(
        self,
        owner: Owner,
        *,
        status: TodoFilter | str = TodoFilter.ALL,
        priority: Priority | str | None = None,
    ) -> list[Todo]:
        flt = TodoFilter(status)
        prio = None if priority is None else Priority.parse(priority)
        return [
            t
            for t in self._store.get(owner)
            if flt.matches(t) and (prio is None or t.priority is prio)
        ]

    def get_statistics(self, owner: Owner) -> TodoStatistics:
        """Cached statistics as of the last committed mutation."""
        return self._store.get_stats(owner)

    def recompute_statistics(self, owner: Owner) -> TodoStatistics:
        """Statistics computed on demand from the current list; does not touch the cache."""
        return compute_statistics(self._store.get(owner))

    def get_next_id(self, owner: Owner) -> int:
        return self._store.get_next_id(owner)

    def owners(self) -> list[Owner]:
        return self._store.owners()
