# src/taskpad/tasks/task_api.py

from __future__ import annotations

from ..core.intents import (
    AddTask,
    ClearCompleted,
    DeleteTask,
    EditTask,
    SetCategory,
    SetFilter,
    SetPriority,
    ToggleTask,
    ViewState,
    apply_intent,
    derive_view,
)
from ..core.state import AppState
from .task_models import FilterMode, Priority


def add_task(
    state: AppState,
    text: str,
    priority: Priority | str = Priority.MEDIUM,
    category: str = "",
) -> ViewState:
    return apply_intent(state, AddTask(text=text, priority=priority, category=category))


def toggle_task(state: AppState, task_id: str) -> ViewState:
    return apply_intent(state, ToggleTask(task_id=task_id))


def edit_task(state: AppState, task_id: str, new_text: str) -> ViewState:
    return apply_intent(state, EditTask(task_id=task_id, new_text=new_text))


def delete_task(state: AppState, task_id: str) -> ViewState:
    return apply_intent(state, DeleteTask(task_id=task_id))


def set_filter(state: AppState, mode: FilterMode | str) -> ViewState:
    """Raises ValueError for an unknown mode; the current filter is kept in that case."""
    return apply_intent(state, SetFilter(mode=mode))


def set_priority(state: AppState, task_id: str, priority: Priority | str) -> ViewState:
    return apply_intent(state, SetPriority(task_id=task_id, priority=priority))


def set_category(state: AppState, task_id: str, category: str) -> ViewState:
    return apply_intent(state, SetCategory(task_id=task_id, category=category))


def clear_completed(state: AppState) -> ViewState:
    return apply_intent(state, ClearCompleted())


def current_view(state: AppState) -> ViewState:
    return derive_view(state)
