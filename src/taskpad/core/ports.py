# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete implementations.
This keeps the storage backend swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class KeyValueSlot(Protocol):
    """
    Durable string key-value storage (the local analogue of browser localStorage).

    get() returns None for a missing key. set() fully overwrites the previous value.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


class TaskPersistence(Protocol):
    """
    Serialized copy of the task list, kept only for durability.

    load() never raises: missing or corrupt data reads as an empty list.
    save() returns False when the write failed (in-memory state is unaffected).
    """

    def load(self) -> list[Task]: ...
    def save(self, tasks: Sequence[Task]) -> bool: ...
