# src/todo_ledger/core/clock.py

from __future__ import annotations

import time


class SystemClock:
    """Wall clock in Unix milliseconds."""

    def now(self) -> int:
        return time.time_ns() // 1_000_000
