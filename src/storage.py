"""Persistence backends for the todo list.

Both backends store and return the complete list; there are no partial
updates. Failures never reach the caller: save() degrades to a no-op and
load() to None, with the cause written to the log only.
"""
from __future__ import annotations
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence

import click

from models import Todo

APP_NAME = "todocli"
TODOS_FILENAME = "todos.json"

log = logging.getLogger(__name__)


def default_todos_path() -> Optional[Path]:
    """Resolve the well-known todos file in the per-user app directory.

    Returns None if the platform directory cannot be determined.
    """
    try:
        return Path(click.get_app_dir(APP_NAME)) / TODOS_FILENAME
    except (OSError, RuntimeError, KeyError) as exc:
        log.warning("Could not resolve todos path: %s", exc)
        return None


class Storage(ABC):
    """Save/load capability shared by every backend."""

    @abstractmethod
    def save(self, todos: Sequence[Todo]) -> None:
        """Replace whatever was stored with ``todos``."""

    @abstractmethod
    def load(self) -> Optional[List[Todo]]:
        """Return the last saved list, or None if there is none."""


class JSONFileStorage(Storage):
    def __init__(self, path: Optional[Path] = None):
        self._path: Optional[Path] = Path(path) if path is not None else default_todos_path()

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def save(self, todos: Sequence[Todo]) -> None:
        """Overwrite the file with a pretty-printed JSON array."""
        if self._path is None:
            return
        try:
            payload = json.dumps([t.to_dict() for t in todos], indent=4, ensure_ascii=False)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, 'w', encoding='utf-8') as f:
                f.write(payload)
        except (OSError, TypeError, ValueError) as exc:
            log.warning("Saving %d todos to %s failed: %s", len(todos), self._path, exc)
            return
        log.debug("Saved %d todos to %s", len(todos), self._path)

    def load(self) -> Optional[List[Todo]]:
        if self._path is None:
            return None
        try:
            with open(self._path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            todos = [Todo.from_dict(raw) for raw in data]
        except FileNotFoundError:
            log.debug("No todos file at %s", self._path)
            return None
        except (OSError, ValueError, KeyError, TypeError) as exc:
            log.warning("Loading todos from %s failed: %s", self._path, exc)
            return None
        log.debug("Loaded %d todos from %s", len(todos), self._path)
        return todos

    def __repr__(self) -> str:
        return f"JSONFileStorage(path={self._path})"


class InMemoryStorage(Storage):
    """Keeps the last saved list for the lifetime of the object only."""

    def __init__(self) -> None:
        self._todos: Optional[List[Todo]] = None

    def save(self, todos: Sequence[Todo]) -> None:
        # Todo is frozen, so a shallow copy is a full snapshot
        self._todos = list(todos)

    def load(self) -> Optional[List[Todo]]:
        if self._todos is None:
            return None
        return list(self._todos)

    def __repr__(self) -> str:
        count = 'empty' if self._todos is None else len(self._todos)
        return f"InMemoryStorage({count})"
