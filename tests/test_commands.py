# tests/test_commands.py

from __future__ import annotations

import pytest

from taskpad.cli.commands import (
    SUGGESTED_CATEGORIES,
    CommandRegistry,
    parse_add_args,
    registry,
    resolve_task,
)
from taskpad.core.state import AppState
from taskpad.tasks.task_models import FilterMode, Priority, Task


def test_command_registry_routes_and_aliases(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"a": 0}

    def handler(state, args):
        called["a"] += 1
        return "a:" + ",".join(args)

    reg.register("alpha", handler, "alpha", aliases=["al"])

    assert reg.handle(state, "/alpha x y") == "a:x,y"
    assert reg.handle(state, "/AL") == "a:"
    assert called["a"] == 2
    assert "/alpha - alpha" in reg.build_help()


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_parse_add_args() -> None:
    assert parse_add_args("Buy milk") == ("Buy milk", Priority.MEDIUM, "")
    assert parse_add_args("!high #Shopping Buy milk") == ("Buy milk", Priority.HIGH, "Shopping")
    assert parse_add_args("#Work !LOW report") == ("report", Priority.LOW, "Work")
    assert parse_add_args("! bang") == ("! bang", Priority.MEDIUM, "")
    assert parse_add_args("#Home  water   the plants ") == ("water   the plants", Priority.MEDIUM, "Home")
    with pytest.raises(ValueError):
        parse_add_args("!urgent x")


def test_add_done_edit_rm_cycle(state: AppState) -> None:
    out = registry.handle(state, "/add !high #Shopping Buy milk")
    assert out is not None and out.startswith("Added: Buy milk")
    task = state.task_store.list()[0]
    assert task.priority is Priority.HIGH
    assert task.category == "Shopping"

    out = registry.handle(state, "/done 1")
    assert out is not None and out.startswith("Marked completed")
    assert state.task_store.list()[0].completed is True

    out = registry.handle(state, "/edit 1 Buy oat milk")
    assert out is not None and out.startswith("Edited: Buy oat milk")

    out = registry.handle(state, f"/rm {task.id}")
    assert out is not None and out.startswith("Deleted: Buy oat milk")
    assert state.task_store.list() == []


def test_add_blank_and_bad_priority(state: AppState) -> None:
    assert registry.handle(state, "/add") == "Task text is empty; nothing added."
    assert "Unknown priority" in (registry.handle(state, "/add !urgent x") or "")
    assert len(state.task_store) == 0


def test_numbers_follow_visible_list(state: AppState) -> None:
    registry.handle(state, "/add older")
    registry.handle(state, "/add newer")
    registry.handle(state, "/done 2")  # "older"
    registry.handle(state, "/filter completed")
    assert state.filter_mode is FilterMode.COMPLETED

    assert resolve_task(state, "1").text == "older"
    assert resolve_task(state, "2") is None
    assert resolve_task(state, "0") is None


def test_missing_task_reference(state: AppState) -> None:
    for cmd in ("/done 3", "/edit 3 text", "/rm 3", "/prio 3 low", "/cat 3 x"):
        assert "No task matches '3'" in (registry.handle(state, cmd) or "")


def test_usage_messages(state: AppState) -> None:
    assert (registry.handle(state, "/done") or "").startswith("Usage")
    assert (registry.handle(state, "/edit 1") or "").startswith("Usage")
    assert (registry.handle(state, "/filter bogus") or "").startswith("Usage")
    assert "Current filter: all" in (registry.handle(state, "/filter") or "")


def test_prio_cat_clear_stats(state: AppState) -> None:
    registry.handle(state, "/add task one")
    assert "Unknown priority" in (registry.handle(state, "/prio 1 urgent") or "")
    assert (registry.handle(state, "/prio 1 low") or "").startswith("Priority set to low")
    assert (registry.handle(state, "/cat 1 Health") or "").startswith("Category set to Health")
    assert (registry.handle(state, "/cat 1") or "").startswith("Category set to (none)")

    assert registry.handle(state, "/clear") == "No completed tasks to clear."
    registry.handle(state, "/done 1")
    assert "1 of 1 completed" in (registry.handle(state, "/stats") or "")
    assert (registry.handle(state, "/clear") or "").startswith("Cleared 1 completed task(s).")
    assert registry.handle(state, "/stats") == "No tasks yet."


def test_status_and_help(state: AppState) -> None:
    out = registry.handle(state, "/status") or ""
    assert "state.json" in out
    assert "elegant-todos" in out
    assert "/add" in (registry.handle(state, "/help") or "")


def test_resolve_by_id_prefix(state: AppState) -> None:
    registry.handle(state, "/add first")
    registry.handle(state, "/add second")
    first = state.task_store.list()[1]

    assert resolve_task(state, first.id[:9]) is first
    assert resolve_task(state, first.id.upper()) is first
    assert resolve_task(state, "zzz") is None


def test_three_parameter_handlers_get_raw_text(state: AppState) -> None:
    reg = CommandRegistry()

    def handler(state, args, raw):
        return repr(raw)

    reg.register("echo", handler, "echo")
    assert reg.handle(state, "/echo   a  b   c  ") == "'a  b   c'"
    assert reg.handle(state, "/echo") == "''"


def test_edit_and_cat_keep_inner_spacing(state: AppState) -> None:
    registry.handle(state, "/add Buy milk")

    out = registry.handle(state, "/edit 1   Buy   oat milk")
    assert out is not None and out.startswith("Edited: Buy   oat milk")
    assert state.task_store.list()[0].text == "Buy   oat milk"

    registry.handle(state, "/cat 1 Side  projects")
    assert state.task_store.list()[0].category == "Side  projects"


def test_digit_reference_falls_back_to_id_prefix(state: AppState) -> None:
    task = Task(text="numbered id", id="12345678-aaaa-4bbb-8ccc-000000000000")
    state.task_store._tasks.insert(0, task)
    registry.handle(state, "/add another")

    assert resolve_task(state, "1").text == "another"
    assert resolve_task(state, "2") is task
    assert resolve_task(state, "1234567") is task
    assert (registry.handle(state, "/done 12345678") or "").startswith("Marked completed: numbered id")
    assert resolve_task(state, "99999999") is None


def test_help_suggests_categories(state: AppState) -> None:
    assert SUGGESTED_CATEGORIES == ("Work", "Personal", "Health", "Learning", "Shopping", "Other")
    help_text = registry.handle(state, "/help") or ""
    assert "#Work" in help_text
    assert "Learning" in help_text
    assert "Shopping" in help_text
    assert "Suggested: Work, Personal" in (registry.handle(state, "/cat") or "")
