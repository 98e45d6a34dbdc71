# src/todo_ledger/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Limits are fixed once the engine is built; the engine never changes them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO_LEDGER"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Todo limits ----
    max_title_length: int
    max_description_length: int
    max_todos_per_owner: int
    id_base: int

    # ---- Events ----
    event_log_size: int

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "todo-ledger"),
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/todo_ledger")),
            max_title_length=_env_int(_k("MAX_TITLE_LENGTH"), 100),
            max_description_length=_env_int(_k("MAX_DESCRIPTION_LENGTH"), 500),
            max_todos_per_owner=_env_int(_k("MAX_TODOS_PER_OWNER"), 50),
            id_base=_env_int(_k("ID_BASE"), 0),
            event_log_size=_env_int(_k("EVENT_LOG_SIZE"), 1000),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

