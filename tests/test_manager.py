# tests/test_manager.py

from __future__ import annotations

from pathlib import Path

import pytest

from manager import TodoManager
from models import Todo
from storage import InMemoryStorage, JSONFileStorage

from .fakes import RecordingStorage


def test_starts_empty_when_storage_has_nothing(memory_storage) -> None:
    assert TodoManager(memory_storage).todos == []


def test_starts_with_loaded_todos() -> None:
    loaded = [Todo(title="a"), Todo(title="b")]
    sut = TodoManager(RecordingStorage(loaded=loaded))
    assert sut.todos == loaded
    assert len(sut) == 2


def test_keeps_the_injected_storage(memory_storage) -> None:
    sut = TodoManager(memory_storage)
    assert sut.storage is memory_storage
    assert isinstance(sut.storage, InMemoryStorage)


def test_list_empty_prints_empty_header(memory_storage, capsys) -> None:
    TodoManager(memory_storage).list_todos()
    out = capsys.readouterr().out
    assert "There are no Todos at the moment. Please add some" in out
    assert "Your Todos:" not in out


def test_list_prints_numbered_descriptions_in_order(memory_storage, capsys) -> None:
    sut = TodoManager(memory_storage)
    sut.add_todo("Make coffee")
    sut.add_todo("Go swimming")
    sut.toggle_completion(2)
    capsys.readouterr()

    sut.list_todos()
    lines = capsys.readouterr().out.splitlines()
    assert any("Your Todos:" in line for line in lines)
    assert lines[-2:] == ["1. ❌ Make coffee", "2. ✅ Go swimming"]


@pytest.mark.parametrize("title", ["Make coffee", "", "  spaced  ", "Café ☕"])
def test_add_appends_open_todo_and_saves(title: str, capsys) -> None:
    store = RecordingStorage()
    sut = TodoManager(store)
    sut.add_todo("first")
    before = len(sut)

    todo = sut.add_todo(title)

    assert len(sut) == before + 1
    assert sut.todos[-1] is todo
    assert todo.title == title
    assert not todo.is_completed
    assert todo.description.startswith("❌")
    assert store.saved[-1] == sut.todos
    assert "Todo added!" in capsys.readouterr().out


def test_added_todos_get_distinct_ids(memory_storage) -> None:
    sut = TodoManager(memory_storage)
    for _ in range(5):
        sut.add_todo("same title")
    assert len({t.id for t in sut.todos}) == 5


def test_toggle_flips_and_saves(capsys) -> None:
    store = RecordingStorage()
    sut = TodoManager(store)
    original = sut.add_todo("Make coffee")

    assert sut.toggle_completion(1) is True
    assert sut.todos[0].is_completed
    assert sut.todos[0].id == original.id
    assert store.saved[-1][0].is_completed
    assert "Todo completion status toggled!" in capsys.readouterr().out


def test_toggle_twice_is_identity(memory_storage) -> None:
    sut = TodoManager(memory_storage)
    sut.add_todo("a")
    sut.add_todo("b")
    sut.toggle_completion(2)
    before = list(sut.todos)

    sut.toggle_completion(1)
    sut.toggle_completion(1)

    assert sut.todos == before


@pytest.mark.parametrize("op", ["toggle_completion", "delete_todo"])
@pytest.mark.parametrize("offset", ["zero", "negative", "past_end"])
def test_out_of_range_index_changes_nothing(op: str, offset: str, capsys) -> None:
    store = RecordingStorage()
    sut = TodoManager(store)
    sut.add_todo("a")
    sut.add_todo("b")
    saves = len(store.saved)
    before = list(sut.todos)
    capsys.readouterr()

    index = {"zero": 0, "negative": -1, "past_end": len(sut) + 1}[offset]
    assert getattr(sut, op)(index) is False

    assert sut.todos == before
    assert len(store.saved) == saves
    assert "Invalid todo number. Please try again" in capsys.readouterr().out


def test_delete_removes_and_keeps_order_of_the_rest(capsys) -> None:
    store = RecordingStorage()
    sut = TodoManager(store)
    for title in ("a", "b", "c", "d"):
        sut.add_todo(title)

    assert sut.delete_todo(2) is True

    assert [t.title for t in sut.todos] == ["a", "c", "d"]
    assert [t.title for t in store.saved[-1]] == ["a", "c", "d"]
    assert "Todo deleted!" in capsys.readouterr().out


def test_every_mutation_saves_the_full_list() -> None:
    store = RecordingStorage()
    sut = TodoManager(store)
    sut.add_todo("a")
    sut.add_todo("b")
    sut.toggle_completion(1)
    sut.delete_todo(2)
    assert [len(s) for s in store.saved] == [1, 2, 2, 1]


def test_make_coffee_scenario_with_file_storage(todos_path: Path, capsys) -> None:
    sut = TodoManager(JSONFileStorage(todos_path))
    sut.list_todos()
    assert "There are no Todos at the moment" in capsys.readouterr().out

    sut.add_todo("Make coffee")
    assert len(sut) == 1
    assert sut.todos[0].description == "❌ Make coffee"

    sut.toggle_completion(1)
    assert sut.todos[0].description == "✅ Make coffee"

    sut.delete_todo(1)
    assert sut.todos == []
    assert JSONFileStorage(todos_path).load() == []


def test_new_manager_loads_todos_saved_earlier(todos_path: Path) -> None:
    first = TodoManager(JSONFileStorage(todos_path))
    first.add_todo("Make coffee")
    first.add_todo("Go swimming")

    second = TodoManager(JSONFileStorage(todos_path))
    assert [t.title for t in second.todos] == ["Make coffee", "Go swimming"]
    assert second.todos == first.todos


def test_storage_read_only_once(monkeypatch) -> None:
    store = InMemoryStorage()
    calls = []
    original = store.load
    monkeypatch.setattr(store, "load", lambda: calls.append(1) or original())
    sut = TodoManager(store)
    sut.add_todo("a")
    sut.list_todos()
    sut.toggle_completion(1)
    assert calls == [1]


def test_starts_empty_when_todos_path_is_unusable(tmp_path: Path) -> None:
    sut = TodoManager(JSONFileStorage(tmp_path / ("x" * 300 + ".json")))
    assert sut.todos == []
    sut.add_todo("still works in memory")
    assert len(sut) == 1
