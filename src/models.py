"""Data models for the todo CLI.

Exposes the Todo dataclass. Persisted records use the camel-case key
"isCompleted" so existing todos.json files stay readable.
"""
from __future__ import annotations
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping

DONE_MARK = "✅"
OPEN_MARK = "❌"


@dataclass(frozen=True)
class Todo:
    """A single todo item.

    Fields:
        id: Random UUID assigned at creation; never changes.
        title: Display text, accepted as typed (may be empty).
        is_completed: Completion flag, flipped by toggled().
    """
    title: str
    is_completed: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def description(self) -> str:
        mark = DONE_MARK if self.is_completed else OPEN_MARK
        return f"{mark} {self.title}"

    def __str__(self) -> str:
        return self.description

    def toggled(self) -> "Todo":
        """Return a copy with the completion flag flipped."""
        return replace(self, is_completed=not self.is_completed)

    # -------------------- serialization --------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': str(self.id),
            'title': self.title,
            'isCompleted': self.is_completed,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Todo":
        """Build a Todo from a stored record.

        Raises KeyError, TypeError or ValueError when the record is malformed.
        """
        title = raw['title']
        completed = raw['isCompleted']
        raw_id = raw['id']
        if not isinstance(title, str):
            raise TypeError(f"title must be a string, got {type(title).__name__}")
        if not isinstance(completed, bool):
            raise TypeError(f"isCompleted must be a boolean, got {type(completed).__name__}")
        if not isinstance(raw_id, str):
            raise TypeError(f"id must be a string, got {type(raw_id).__name__}")
        return cls(title=title, is_completed=completed, id=uuid.UUID(raw_id))
