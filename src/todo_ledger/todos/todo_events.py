# src/todo_ledger/todos/todo_events.py

from __future__ import annotations

"""
Mutation events and the sinks that receive them.

Events are emitted by the engine only after the owner's state has been committed.
"""

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..core.ports import EventSink, Owner

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class TodoCreated:
    owner: Owner
    id: int


@dataclass(slots=True, frozen=True)
class TodoUpdated:
    owner: Owner
    id: int


@dataclass(slots=True, frozen=True)
class TodoCompletionToggled:
    owner: Owner
    id: int
    completed: bool


@dataclass(slots=True, frozen=True)
class TodoDeleted:
    owner: Owner
    id: int


class LoggingEventSink:
    """Writes one INFO line per event."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def emit(self, event: Any) -> None:
        if isinstance(event, TodoCompletionToggled):
            state = "completed" if event.completed else "incomplete"
            self._log.info("Todo %s marked as %s owner=%r", event.id, state, event.owner)
        elif isinstance(event, TodoCreated):
            self._log.info("Todo created with ID: %s owner=%r", event.id, event.owner)
        elif isinstance(event, TodoUpdated):
            self._log.info("Todo %s updated owner=%r", event.id, event.owner)
        elif isinstance(event, TodoDeleted):
            self._log.info("Todo %s deleted owner=%r", event.id, event.owner)
        else:
            self._log.info("Event %r", event)


class EventLog:
    """
    Bounded in-memory audit trail.

    Keeps the most recent `max_events` events; older ones are dropped first.
    """

    def __init__(self, max_events: int = 1000) -> None:
        if max_events <= 0:
            raise ValueError("max_events must be positive")
        self._events: deque[Any] = deque(maxlen=max_events)

    def emit(self, event: Any) -> None:
        self._events.append(event)

    def events(self, owner: Owner | None = None) -> list[Any]:
        if owner is None:
            return list(self._events)
        return [e for e in self._events if getattr(e, "owner", None) == owner]

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)


class FanOutEventSink:
    """Forwards every event to each sink, in order."""

    def __init__(self, sinks: Iterable[EventSink]) -> None:
        self._sinks = list(sinks)

    def emit(self, event: Any) -> None:
        for sink in self._sinks:
            sink.emit(event)
