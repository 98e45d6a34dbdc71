# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from todo_ledger.todos.todo_engine import TodoEngine

from .fakes import ManualClock, RecordingEventSink


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with TodoEngine.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        max_title_length=100,
        max_description_length=500,
        max_todos_per_owner=50,
        id_base=0,
        event_log_size=100,
    )


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock(current=1000)


@pytest.fixture()
def sink() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture()
def engine(settings: SimpleNamespace, clock: ManualClock, sink: RecordingEventSink) -> TodoEngine:
    return TodoEngine(settings, clock=clock, events=sink)
