# tests/test_todo_events.py

from __future__ import annotations

import logging

import pytest

from todo_ledger.todos.todo_errors import TodoNotFound
from todo_ledger.todos.todo_events import (
    EventLog,
    FanOutEventSink,
    LoggingEventSink,
    TodoCompletionToggled,
    TodoCreated,
    TodoDeleted,
)

from .fakes import RecordingEventSink


def test_event_log_is_bounded_and_filterable() -> None:
    log = EventLog(max_events=3)
    for i in range(4):
        log.emit(TodoCreated(owner="a" if i % 2 == 0 else "b", id=i))

    assert len(log) == 3
    assert [e.id for e in log.events()] == [1, 2, 3]
    assert [e.id for e in log.events("a")] == [2]

    log.clear()
    assert log.events() == []


def test_event_log_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        EventLog(max_events=0)


def test_fan_out_preserves_order() -> None:
    first = RecordingEventSink()
    second = RecordingEventSink()
    sink = FanOutEventSink([first, second])

    sink.emit(TodoDeleted(owner="a", id=1))

    assert first.events == second.events == [TodoDeleted(owner="a", id=1)]


def test_logging_sink_writes_info_lines(caplog: pytest.LogCaptureFixture) -> None:
    sink = LoggingEventSink()
    with caplog.at_level(logging.INFO, logger="todo_ledger.todos.todo_events"):
        sink.emit(TodoCreated(owner="a", id=0))
        sink.emit(TodoCompletionToggled(owner="a", id=0, completed=True))

    messages = [r.getMessage() for r in caplog.records]
    assert "Todo created with ID: 0 owner='a'" in messages
    assert "Todo 0 marked as completed owner='a'" in messages


def test_engine_emits_nothing_on_failure(engine, sink) -> None:
    with pytest.raises(TodoNotFound):
        engine.toggle_todo_completion("a", 0)
    assert sink.events == []
