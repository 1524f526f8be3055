# src/taskpad/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: Priority | str) -> Priority:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown priority: {raw!r}") from None


class FilterMode(StrEnum):
    """
    Which slice of the canonical list is visible.

    Changing the filter never mutates the list itself.
    """

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: FilterMode | str) -> FilterMode:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown filter mode: {raw!r}") from None


def new_task_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class Task:
    text: str
    priority: Priority = Priority.MEDIUM
    category: str = ""
    completed: bool = False

    # Identity and creation time are assigned once and never change.
    id: str = field(default_factory=new_task_id)
    created_at: datetime = field(default_factory=utc_now)
