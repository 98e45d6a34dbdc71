# src/todo_ledger/bootstrap.py

"""
Composition root.

- loads settings once,
- wires the clock and event sinks into a TodoEngine,
- configures logging for a standalone run.
"""

from __future__ import annotations

import logging

from .config import get_settings
from .core.clock import SystemClock
from .core.ports import Clock, EventSink
from .logging_setup import setup_logging
from .todos.todo_engine import TodoEngine
from .todos.todo_events import EventLog, FanOutEventSink, LoggingEventSink

logger = logging.getLogger(__name__)


def create_engine(
    settings=None,
    *,
    clock: Clock | None = None,
    events: EventSink | None = None,
) -> TodoEngine:
    """
    Build a TodoEngine from settings.

    Defaults: wall clock in milliseconds, and an EventLog fanned out with a LoggingEventSink.
    The default EventLog is exposed as engine.event_log; injected sinks leave it None.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    event_log: EventLog | None = None
    if events is None:
        event_log = EventLog(max_events=int(getattr(settings, "event_log_size", 1000)))
        events = FanOutEventSink([event_log, LoggingEventSink()])

    return TodoEngine(
        settings, clock=clock or SystemClock(), events=events, event_log=event_log
    )


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    engine = create_engine(settings)
    logger.info(
        "%s ready: max_title=%d max_description=%d max_todos=%d (log file %s)",
        settings.app_name,
        engine.max_title_length,
        engine.max_description_length,
        engine.max_todos_per_owner,
        log_file,
    )


if __name__ == "__main__":
    main()
