# src/taskpad/tasks/task_filters.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .task_models import FilterMode, Task


@dataclass(frozen=True, slots=True)
class TaskSummary:
    completed_count: int
    total_count: int

    @property
    def active_count(self) -> int:
        return self.total_count - self.completed_count

    @property
    def progress(self) -> float:
        """Completed share in [0, 1]; 0.0 for an empty list."""
        if self.total_count == 0:
            return 0.0
        return self.completed_count / self.total_count


def select_visible(tasks: Sequence[Task], mode: FilterMode | str) -> list[Task]:
    """Visible subset for a filter mode, in canonical order."""
    mode = FilterMode.parse(mode)
    if mode is FilterMode.ACTIVE:
        return [t for t in tasks if not t.completed]
    if mode is FilterMode.COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def summary(tasks: Sequence[Task]) -> TaskSummary:
    return TaskSummary(
        completed_count=sum(1 for t in tasks if t.completed),
        total_count=len(tasks),
    )


_EMPTY_MESSAGES: dict[FilterMode, tuple[str, str]] = {
    FilterMode.ALL: ("No tasks yet", "Add your first task to get started!"),
    FilterMode.ACTIVE: ("No active tasks", "All caught up! Great job!"),
    FilterMode.COMPLETED: ("No completed tasks yet", "Complete some tasks to see them here"),
}


def empty_state_message(mode: FilterMode | str) -> tuple[str, str]:
    """(headline, hint) shown when nothing is visible under `mode`."""
    return _EMPTY_MESSAGES[FilterMode.parse(mode)]
