# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.cli.bootstrap import create_initial_state
from taskpad.core.state import AppState
from taskpad.tasks.task_persistence import SlotTaskPersistence
from taskpad.tasks.task_store import TaskStore

from .fakes import RecordingSlot


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and command handlers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="WARNING",
        data_dir=tmp_path,
        state_path=tmp_path / "state.json",
        storage_key="elegant-todos",
        ephemeral=False,
        default_filter="all",
    )


@pytest.fixture()
def slot() -> RecordingSlot:
    return RecordingSlot()


@pytest.fixture()
def store(slot: RecordingSlot) -> TaskStore:
    s = TaskStore(SlotTaskPersistence(slot))
    s.init()
    return s


@pytest.fixture()
def state(settings: SimpleNamespace, slot: RecordingSlot) -> AppState:
    """AppState wired through the real bootstrap, with an in-memory slot."""
    return create_initial_state(settings=settings, slot=slot)
