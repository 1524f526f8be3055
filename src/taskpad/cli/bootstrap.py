# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the durable slot, persistence adapter and TaskStore into AppState,
- restores saved tasks (store.init()) before the first intent is handled.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueSlot
from ..core.state import AppState
from ..storage.kv_store import JsonFileSlotStore, MemorySlotStore
from ..tasks.task_models import FilterMode
from ..tasks.task_persistence import SlotTaskPersistence
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.state_path.parent.mkdir(parents=True, exist_ok=True)


def build_slot(settings) -> KeyValueSlot:
    if getattr(settings, "ephemeral", False):
        logger.info("Ephemeral mode: tasks will not survive this session.")
        return MemorySlotStore()
    return JsonFileSlotStore(settings.state_path)


def create_initial_state(*, settings=None, slot: KeyValueSlot | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the slot) injectable makes the app easier to test and avoids hidden
    global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if slot is None:
        slot = build_slot(settings)

    store = TaskStore(SlotTaskPersistence(slot, key=settings.storage_key))
    store.init()

    try:
        filter_mode = FilterMode.parse(getattr(settings, "default_filter", "all"))
    except ValueError:
        logger.warning("Unknown default filter %r; using 'all'.", settings.default_filter)
        filter_mode = FilterMode.ALL

    return AppState(settings=settings, task_store=store, filter_mode=filter_mode)


def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        state.task_store.dispose()
    except Exception:
        logger.exception("Failed to persist tasks on shutdown.")
