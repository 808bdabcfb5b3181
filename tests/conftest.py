# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from storage import InMemoryStorage, JSONFileStorage


@pytest.fixture()
def todos_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "todos.json"


@pytest.fixture()
def file_storage(todos_path: Path) -> JSONFileStorage:
    return JSONFileStorage(todos_path)


@pytest.fixture()
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture(params=["memory", "file"])
def any_storage(request, tmp_path: Path):
    """Each storage backend in turn, for the shared contract tests."""
    if request.param == "memory":
        return InMemoryStorage()
    return JSONFileStorage(tmp_path / "todos.json")


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("TODO_STORAGE", "TODO_DATA_FILE", "TODO_LOG_DIR", "TODO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture()
def restore_logging():
    """Undo setup_logging() side effects on the root logger."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(saved_level)
    logging.captureWarnings(False)
