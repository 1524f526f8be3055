# src/taskpad/core/intents.py

"""
User intents as plain command objects.

A presentation layer never mutates the store directly. It builds an intent and hands it to
apply_intent(), which performs the store mutation (or filter change) and re-derives the view:

    intent -> TaskStore mutation -> ViewState

Persistence happens inside the store, after each effective mutation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..tasks.task_filters import TaskSummary, select_visible, summary
from ..tasks.task_models import FilterMode, Priority, Task
from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddTask:
    text: str
    priority: Priority | str = Priority.MEDIUM
    category: str = ""


@dataclass(frozen=True, slots=True)
class ToggleTask:
    task_id: str


@dataclass(frozen=True, slots=True)
class EditTask:
    task_id: str
    new_text: str


@dataclass(frozen=True, slots=True)
class DeleteTask:
    task_id: str


@dataclass(frozen=True, slots=True)
class SetFilter:
    mode: FilterMode | str


@dataclass(frozen=True, slots=True)
class SetPriority:
    task_id: str
    priority: Priority | str


@dataclass(frozen=True, slots=True)
class SetCategory:
    task_id: str
    category: str


@dataclass(frozen=True, slots=True)
class ClearCompleted:
    pass


Intent = (
    AddTask | ToggleTask | EditTask | DeleteTask | SetFilter | SetPriority | SetCategory | ClearCompleted
)


@dataclass(frozen=True, slots=True)
class ViewState:
    """Read-only snapshot a renderer observes."""

    filter_mode: FilterMode
    visible: list[Task]
    summary: TaskSummary


def derive_view(state: AppState) -> ViewState:
    tasks = state.task_store.list()
    return ViewState(
        filter_mode=state.filter_mode,
        visible=select_visible(tasks, state.filter_mode),
        summary=summary(tasks),
    )


def apply_intent(state: AppState, intent: Intent) -> ViewState:
    store = state.task_store

    if isinstance(intent, AddTask):
        store.add(intent.text, intent.priority, intent.category)
    elif isinstance(intent, ToggleTask):
        store.toggle(intent.task_id)
    elif isinstance(intent, EditTask):
        store.edit(intent.task_id, intent.new_text)
    elif isinstance(intent, DeleteTask):
        store.remove(intent.task_id)
    elif isinstance(intent, SetFilter):
        state.filter_mode = FilterMode.parse(intent.mode)
        logger.debug("Filter set to %s", state.filter_mode)
    elif isinstance(intent, SetPriority):
        store.set_priority(intent.task_id, intent.priority)
    elif isinstance(intent, SetCategory):
        store.set_category(intent.task_id, intent.category)
    elif isinstance(intent, ClearCompleted):
        store.clear_completed()
    else:
        raise TypeError(f"Unsupported intent: {intent!r}")

    return derive_view(state)
