# tests/test_bootstrap.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_ledger.bootstrap import create_engine
from todo_ledger.logging_setup import setup_logging
from todo_ledger.todos.todo_events import TodoCompletionToggled, TodoCreated

from .fakes import ManualClock, RecordingEventSink


def test_create_engine_uses_injected_ports(settings: SimpleNamespace) -> None:
    clock = ManualClock(current=42)
    sink = RecordingEventSink()
    engine = create_engine(settings, clock=clock, events=sink)

    todo = engine.create_todo("a", "t", "d", "low")

    assert todo.created_at == 42
    assert sink.events == [TodoCreated(owner="a", id=0)]


def test_create_engine_defaults(settings: SimpleNamespace, caplog: pytest.LogCaptureFixture) -> None:
    engine = create_engine(settings)

    with caplog.at_level(logging.INFO, logger="todo_ledger.todos.todo_events"):
        todo = engine.create_todo("a", "t", "d", "low")

    assert todo.created_at > 0
    assert engine.max_todos_per_owner == 50
    assert any("Todo created with ID: 0" in r.getMessage() for r in caplog.records)


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        log_file = setup_logging(log_dir=tmp_path, console_level=logging.WARNING)
        logging.getLogger("todo_ledger.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert log_file == tmp_path / "todo_ledger.log"
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        logging.captureWarnings(False)


def test_default_event_log_is_readable(settings: SimpleNamespace) -> None:
    engine = create_engine(settings)
    assert engine.event_log is not None

    engine.create_todo("a", "t", "d", "low")
    engine.toggle_todo_completion("a", 0)
    engine.create_todo("b", "t", "d", "high")

    assert engine.event_log.events("a") == [
        TodoCreated(owner="a", id=0),
        TodoCompletionToggled(owner="a", id=0, completed=True),
    ]
    assert len(engine.event_log) == 3

    engine.event_log.clear()
    assert engine.event_log.events() == []


def test_injected_sink_leaves_event_log_unset(settings: SimpleNamespace) -> None:
    engine = create_engine(settings, events=RecordingEventSink())
    assert engine.event_log is None


def test_console_filter_levels() -> None:
    from todo_ledger.logging_setup import _ConsoleNoiseFilter

    flt = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 0, "msg", None, None)

    assert flt.filter(rec("todo_ledger.todos.todo_engine", logging.DEBUG))
    assert not flt.filter(rec("todo_ledger.todos.todo_events", logging.INFO))
    assert flt.filter(rec("todo_ledger.todos.todo_events", logging.WARNING))
    assert not flt.filter(rec("py.warnings", logging.WARNING))
    assert flt.filter(rec("py.warnings", logging.ERROR))
    assert not flt.filter(rec("urllib3", logging.WARNING))
