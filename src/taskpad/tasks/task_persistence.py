# src/taskpad/tasks/task_persistence.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from ..config import DEFAULT_STORAGE_KEY
from ..core.ports import KeyValueSlot
from ..storage.kv_store import StorageError
from .task_models import Priority, Task

logger = logging.getLogger(__name__)


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "priority": task.priority.value,
        "category": task.category,
        "createdAt": task.created_at.isoformat(),
    }


def _parse_created_at(raw: Any) -> datetime | None:
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        dt = datetime.fromisoformat(raw.strip())
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def record_to_task(raw: Any) -> Task | None:
    """
    Rebuild a Task from one persisted record.

    Returns None for anything that does not match the Task shape.
    A missing category is accepted as "".
    """
    if not isinstance(raw, dict):
        return None

    task_id = raw.get("id")
    if not isinstance(task_id, str) or not task_id.strip():
        return None

    text = raw.get("text")
    if not isinstance(text, str) or not text.strip():
        return None

    completed = raw.get("completed")
    if not isinstance(completed, bool):
        return None

    try:
        priority = Priority.parse(raw.get("priority"))
    except ValueError:
        return None

    category = raw.get("category", "")
    if category is None:
        category = ""
    if not isinstance(category, str):
        return None

    created_at = _parse_created_at(raw.get("createdAt"))
    if created_at is None:
        return None

    return Task(
        id=task_id,
        text=text.strip(),
        completed=completed,
        priority=priority,
        category=category.strip(),
        created_at=created_at,
    )


class SlotTaskPersistence:
    """
    Persists the whole task list as one JSON array under a fixed key.

    Best-effort in both directions:
    - load() degrades to [] on a missing/corrupt slot and drops malformed records
    - save() logs write failures and reports them via its return value
    """

    def __init__(self, slot: KeyValueSlot, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._slot = slot
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save(self, tasks: Sequence[Task]) -> bool:
        payload = json.dumps([task_to_record(t) for t in tasks], ensure_ascii=False)
        try:
            self._slot.set(self._key, payload)
        except StorageError:
            logger.exception("Failed to persist %d tasks under key=%s", len(tasks), self._key)
            return False
        logger.debug("Persisted %d tasks under key=%s", len(tasks), self._key)
        return True

    def load(self) -> list[Task]:
        try:
            raw = self._slot.get(self._key)
        except StorageError:
            logger.exception("Failed to read key=%s; starting empty.", self._key)
            return []

        if raw is None:
            logger.info("No saved tasks under key=%s", self._key)
            return []

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Saved tasks under key=%s are not valid JSON; starting empty.", self._key)
            return []

        if not isinstance(data, list):
            logger.warning("Saved tasks under key=%s are not a JSON array; starting empty.", self._key)
            return []

        out: list[Task] = []
        seen: set[str] = set()
        dropped = 0
        for item in data:
            task = record_to_task(item)
            if task is None or task.id in seen:
                dropped += 1
                continue
            seen.add(task.id)
            out.append(task)

        if dropped:
            logger.warning("Dropped %d malformed task records under key=%s", dropped, self._key)
        logger.info("Loaded %d tasks under key=%s", len(out), self._key)
        return out
