# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import FilterMode
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings stay on the state for easy access in command handlers.
    settings: object

    task_store: TaskStore
    filter_mode: FilterMode = FilterMode.ALL
