"""Todo list logic: owns the session's todos, mutates them, re-persists.

Indexes passed in are 1-based, exactly as shown by list_todos().
"""
import logging
from typing import List

import click

from models import Todo
from storage import Storage
from theme import color, HEADER, SUCCESS, ERROR

EMPTY_HEADER = "There are no Todos at the moment. Please add some"
LIST_HEADER = "\U0001F4DD Your Todos:"
ADDED_MSG = "\U0001F4CC Todo added!"
TOGGLED_MSG = "\U0001F504 Todo completion status toggled!"
DELETED_MSG = "\U0001F5D1 Todo deleted!"
INVALID_NUMBER_MSG = "❗ Invalid todo number. Please try again"

log = logging.getLogger(__name__)


def _say(message: str, *styles: str) -> None:
    click.echo("\n" + color(message, *styles))


class TodoManager:
    def __init__(self, storage: Storage):
        self.storage: Storage = storage
        self.todos: List[Todo] = storage.load() or []
        log.debug("Session started with %d todos from %r", len(self.todos), storage)

    # -------------------- queries --------------------
    def __len__(self) -> int:
        return len(self.todos)

    @property
    def is_empty(self) -> bool:
        return not self.todos

    def _valid_index(self, index: int) -> bool:
        return 1 <= index <= len(self.todos)

    def _persist(self) -> None:
        self.storage.save(self.todos)

    # -------------------- display --------------------
    def list_todos(self) -> None:
        if self.is_empty:
            _say(EMPTY_HEADER, HEADER)
            return
        _say(LIST_HEADER, HEADER)
        for number, todo in enumerate(self.todos, start=1):
            click.echo(f"{number}. {todo.description}")

    # -------------------- todo operations --------------------
    def add_todo(self, title: str) -> Todo:
        todo = Todo(title=title)
        self.todos.append(todo)
        self._persist()
        _say(ADDED_MSG, SUCCESS)
        return todo

    def toggle_completion(self, index: int) -> bool:
        if not self._valid_index(index):
            _say(INVALID_NUMBER_MSG, ERROR)
            return False
        self.todos[index - 1] = self.todos[index - 1].toggled()
        self._persist()
        _say(TOGGLED_MSG, SUCCESS)
        return True

    def delete_todo(self, index: int) -> bool:
        if not self._valid_index(index):
            _say(INVALID_NUMBER_MSG, ERROR)
            return False
        removed = self.todos.pop(index - 1)
        log.debug("Deleted todo %s", removed.id)
        self._persist()
        _say(DELETED_MSG, SUCCESS)
        return True
