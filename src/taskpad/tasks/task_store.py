# src/taskpad/tasks/task_store.py

from __future__ import annotations

import logging

from ..core.ports import TaskPersistence
from .task_models import Priority, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Owner of the canonical task list (newest first).

    Contract:
    - every operation is synchronous and runs over the full in-memory list
    - empty text (after trim) and unknown ids are silent no-ops
    - each effective mutation is persisted after the in-memory change is visible;
      no-ops do not touch storage

    Lifecycle:
    - init()    -> replace the list with whatever persistence.load() returns
    - dispose() -> final save
    """

    def __init__(self, persistence: TaskPersistence) -> None:
        self._persistence = persistence
        self._tasks: list[Task] = []

    # ---- lifecycle ----

    def init(self) -> None:
        self._tasks = list(self._persistence.load())
        logger.info("TaskStore ready total=%d", len(self._tasks))

    def dispose(self) -> None:
        self._persistence.save(self._tasks)
        logger.info("TaskStore disposed total=%d", len(self._tasks))

    # ---- low-level helpers ----

    def _find(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _persist(self) -> None:
        self._persistence.save(self._tasks)

    # ---- public API ----

    def list(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        return self._find(task_id)

    def __len__(self) -> int:
        return len(self._tasks)

    def add(
        self,
        text: str,
        priority: Priority | str = Priority.MEDIUM,
        category: str | None = "",
    ) -> Task | None:
        clean = (text or "").strip()
        if not clean:
            logger.debug("Ignoring add with empty text.")
            return None

        task = Task(
            text=clean,
            priority=Priority.parse(priority),
            category=(category or "").strip(),
        )
        self._tasks.insert(0, task)
        logger.debug("Task added id=%s priority=%s category=%r", task.id, task.priority, task.category)
        self._persist()
        return task

    def toggle(self, task_id: str) -> None:
        task = self._find(task_id)
        if task is None:
            return
        task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)
        self._persist()

    def edit(self, task_id: str, new_text: str) -> None:
        clean = (new_text or "").strip()
        if not clean:
            return
        task = self._find(task_id)
        if task is None:
            return
        task.text = clean
        logger.debug("Task edited id=%s", task_id)
        self._persist()

    def set_priority(self, task_id: str, priority: Priority | str) -> None:
        new_priority = Priority.parse(priority)
        task = self._find(task_id)
        if task is None:
            return
        task.priority = new_priority
        logger.debug("Task priority set id=%s priority=%s", task_id, new_priority.value)
        self._persist()

    def set_category(self, task_id: str, category: str | None) -> None:
        task = self._find(task_id)
        if task is None:
            return
        task.category = (category or "").strip()
        logger.debug("Task category set id=%s category=%r", task_id, task.category)
        self._persist()

    def remove(self, task_id: str) -> None:
        task = self._find(task_id)
        if task is None:
            return
        self._tasks.remove(task)
        logger.debug("Task removed id=%s", task_id)
        self._persist()

    def clear_completed(self) -> int:
        kept = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(kept)
        if not removed:
            return 0
        self._tasks = kept
        logger.debug("Cleared %d completed tasks", removed)
        self._persist()
        return removed
