# src/todo_ledger/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the todo engine.

The engine depends on Protocols instead of concrete implementations.
Time and event delivery belong to the surrounding runtime; tests swap them for fakes.
"""

from collections.abc import Hashable
from typing import Any, Protocol

Owner = Hashable
# Any hashable identity already verified by the caller (account id, user id, ...).


class Clock(Protocol):
    """Logical time source. The engine treats values as opaque and never checks monotonicity."""

    def now(self) -> int: ...


class EventSink(Protocol):
    """
    Post-commit notification port.

    Receives one event per successful mutation; never called on failure.
    """

    def emit(self, event: Any) -> None: ...
