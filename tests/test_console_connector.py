# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterator

from taskpad.cli import commands
from taskpad.connectors.console_connector import handle_line, run_console_loop
from taskpad.core.state import AppState
from taskpad.tasks.task_models import Priority


def _feeder(lines: list[str]):
    it: Iterator[str] = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_plain_text_adds_task(state: AppState) -> None:
    out = handle_line(state, "  water the plants  ")
    assert out is not None and out.startswith("Added: water the plants")
    assert state.task_store.list()[0].text == "water the plants"


def test_empty_line_is_ignored(state: AppState) -> None:
    assert handle_line(state, "   ") is None
    assert len(state.task_store) == 0


def test_handler_crash_is_reported(state: AppState, monkeypatch) -> None:
    def boom(state, args):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "boom", boom)
    assert handle_line(state, "/boom") == "Internal error while handling a command."


def test_loop_runs_until_exit(state: AppState) -> None:
    written: list[str] = []
    run_console_loop(
        state,
        read_line=_feeder(["Buy milk", "/done 1", "/exit", "never read"]),
        write=written.append,
    )
    assert state.task_store.list()[0].completed is True
    assert any(w.startswith("Marked completed: Buy milk") for w in written)
    assert len(state.task_store) == 1


def test_loop_stops_on_eof(state: AppState) -> None:
    written: list[str] = []
    run_console_loop(state, read_line=_feeder(["one", "two"]), write=written.append)
    assert [t.text for t in state.task_store.list()] == ["two", "one"]
    assert "No tasks yet" in written[1]


def test_plain_text_is_added_verbatim(state: AppState) -> None:
    out = handle_line(state, "!urgent call the bank")
    assert out is not None and out.startswith("Added: !urgent call the bank")

    out = handle_line(state, "#1 goal:   sleep  more")
    assert out is not None and out.startswith("Added: #1 goal:   sleep  more")

    newest, older = state.task_store.list()
    assert newest.text == "#1 goal:   sleep  more"
    assert newest.category == ""
    assert older.text == "!urgent call the bank"
    assert older.priority is Priority.MEDIUM
    assert older.category == ""
