# tests/test_todo_models.py

from __future__ import annotations

import pytest

from todo_ledger.todos.todo_models import UNSET, Priority, TodoFilter, TodoPatch


@pytest.mark.parametrize("raw", ["high", "High", " HIGH ", Priority.HIGH])
def test_priority_parse(raw) -> None:
    assert Priority.parse(raw) is Priority.HIGH


def test_priority_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        Priority.parse("urgent")
    with pytest.raises(TypeError):
        Priority.parse(2)  # type: ignore[arg-type]


def test_patch_defaults_to_unset() -> None:
    patch = TodoPatch()
    assert patch.title is UNSET
    assert patch.is_empty()
    assert not TodoPatch(priority="low").is_empty()
    assert repr(UNSET) == "UNSET"


def test_filter_values() -> None:
    assert TodoFilter("active") is TodoFilter.ACTIVE
    with pytest.raises(ValueError):
        TodoFilter("archived")
