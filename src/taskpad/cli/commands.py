# src/taskpad/cli/commands.py

from __future__ import annotations

import inspect
import re
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import Priority, Task
from .render import render_progress, render_view

# Handlers get the whitespace-split args; three-parameter handlers also get the raw text
# after the command name, so free-form task text keeps its inner spacing.
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], str], str]
CommandHandler = CommandHandler2 | CommandHandler3

SUGGESTED_CATEGORIES = ("Work", "Personal", "Health", "Learning", "Shopping", "Other")

_ADD_OPTION_RE = re.compile(r"([!#]\S+)(?:\s+|$)")


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/add, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        body = line[1:].lstrip()
        parts = body.split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        raw = body[len(parts[0]) :].strip()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, raw)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Plain text (no leading /) adds a task exactly as typed, with medium priority.")
        lines.append(f"Suggested categories: {', '.join(SUGGESTED_CATEGORIES)}.")
        return "\n".join(lines)


registry = CommandRegistry()


def resolve_task(state: AppState, ref: str) -> Task | None:
    """
    Find a task by its 1-based position in the visible list, or by a unique id prefix.

    An all-digit reference is tried as a position first and falls back to an id prefix
    when no visible task sits at that position.
    """
    if ref.isdigit():
        visible = task_api.current_view(state).visible
        idx = int(ref) - 1
        if 0 <= idx < len(visible):
            return visible[idx]

    ref = ref.lower()
    matches = [t for t in state.task_store.list() if t.id.lower().startswith(ref)]
    return matches[0] if len(matches) == 1 else None


def split_ref(raw: str) -> tuple[str, str]:
    """'<ref> rest of line' -> (ref, rest) with the rest's inner spacing untouched."""
    pieces = raw.split(None, 1)
    if not pieces:
        return "", ""
    return pieces[0], pieces[1] if len(pieces) > 1 else ""


def parse_add_args(raw: str) -> tuple[str, Priority, str]:
    """
    Split "/add" text into (text, priority, category).

    Leading "!low|!medium|!high" sets the priority, leading "#word" sets the category.
    The remaining text is kept as typed. Raises ValueError for an unknown priority.
    """
    priority = Priority.MEDIUM
    category = ""
    rest = raw.strip()
    while m := _ADD_OPTION_RE.match(rest):
        token = m.group(1)
        if token.startswith("!"):
            priority = Priority.parse(token[1:])
        else:
            category = token[1:]
        rest = rest[m.end() :]
    return rest, priority, category


def add_plain_text(state: AppState, text: str, priority: Priority = Priority.MEDIUM, category: str = "") -> str:
    before = len(state.task_store)
    view = task_api.add_task(state, text, priority, category)
    if len(state.task_store) == before:
        return "Task text is empty; nothing added."
    return f"Added: {state.task_store.list()[0].text}\n{render_view(view)}"


def _not_found(ref: str) -> str:
    return f"No task matches '{ref}'. Use /list to see task numbers."


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_view(task_api.current_view(state))


def cmd_add(state: AppState, args: list[str], raw: str) -> str:
    try:
        text, priority, category = parse_add_args(raw)
    except ValueError as e:
        return f"{e}. Use !low, !medium or !high."
    return add_plain_text(state, text, priority, category)


def cmd_done(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /done <number|id>"
    task = resolve_task(state, args[0])
    if task is None:
        return _not_found(args[0])
    view = task_api.toggle_task(state, task.id)
    status = "completed" if task.completed else "active"
    return f"Marked {status}: {task.text}\n{render_view(view)}"


def cmd_edit(state: AppState, args: list[str], raw: str) -> str:
    ref, new_text = split_ref(raw)
    if not ref or not new_text:
        return "Usage: /edit <number|id> <new text>"
    task = resolve_task(state, ref)
    if task is None:
        return _not_found(ref)
    view = task_api.edit_task(state, task.id, new_text)
    return f"Edited: {task.text}\n{render_view(view)}"


def cmd_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /rm <number|id>"
    task = resolve_task(state, args[0])
    if task is None:
        return _not_found(args[0])
    view = task_api.delete_task(state, task.id)
    return f"Deleted: {task.text}\n{render_view(view)}"


def cmd_prio(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /prio <number|id> low|medium|high"
    task = resolve_task(state, args[0])
    if task is None:
        return _not_found(args[0])
    try:
        view = task_api.set_priority(state, task.id, args[1])
    except ValueError as e:
        return f"{e}. Use low, medium or high."
    return f"Priority set to {task.priority.value}: {task.text}\n{render_view(view)}"


def cmd_cat(state: AppState, args: list[str], raw: str) -> str:
    ref, category = split_ref(raw)
    if not ref:
        return f"Usage: /cat <number|id> [category]. Suggested: {', '.join(SUGGESTED_CATEGORIES)}."
    task = resolve_task(state, ref)
    if task is None:
        return _not_found(ref)
    view = task_api.set_category(state, task.id, category)
    label = task.category or "(none)"
    return f"Category set to {label}: {task.text}\n{render_view(view)}"


def cmd_filter(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Current filter: {state.filter_mode.value}. Use /filter all|active|completed."
    try:
        view = task_api.set_filter(state, args[0])
    except ValueError:
        return "Usage: /filter all|active|completed"
    return render_view(view)


def cmd_clear(state: AppState, args: list[str]) -> str:
    before = len(state.task_store)
    view = task_api.clear_completed(state)
    removed = before - len(state.task_store)
    if not removed:
        return "No completed tasks to clear."
    return f"Cleared {removed} completed task(s).\n{render_view(view)}"


def cmd_stats(state: AppState, args: list[str]) -> str:
    s = task_api.current_view(state).summary
    if s.total_count == 0:
        return "No tasks yet."
    return f"{render_progress(s)}\nActive: {s.active_count}"


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    ephemeral = bool(getattr(settings, "ephemeral", False))
    where = "memory only" if ephemeral else str(getattr(settings, "state_path", "?"))
    return (
        "Status:\n"
        f"  Storage: {where}\n"
        f"  Key: {getattr(settings, 'storage_key', '?')}\n"
        f"  Filter: {state.filter_mode.value}\n"
        f"  Tasks: {len(state.task_store)}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks under the current filter.", aliases=["ls"])
registry.register(
    "add",
    cmd_add,
    help_text=(
        "Add a task: /add [!low|!medium|!high] [#category] text "
        f"(e.g. #{SUGGESTED_CATEGORIES[0]}, #{SUGGESTED_CATEGORIES[3]})."
    ),
    aliases=["a"],
)
registry.register(
    "done", cmd_done, help_text="Toggle completion: /done <number|id>.", aliases=["toggle", "t"]
)
registry.register("edit", cmd_edit, help_text="Replace task text: /edit <number|id> <text>.", aliases=["e"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <number|id>.", aliases=["del", "delete"])
registry.register("prio", cmd_prio, help_text="Change priority: /prio <number|id> low|medium|high.")
registry.register(
    "cat",
    cmd_cat,
    help_text=f"Change category: /cat <number|id> [category] ({', '.join(SUGGESTED_CATEGORIES)}).",
)
registry.register(
    "filter", cmd_filter, help_text="Choose visible tasks: /filter all|active|completed.", aliases=["f"]
)
registry.register("clear", cmd_clear, help_text="Delete all completed tasks.")
registry.register("stats", cmd_stats, help_text="Show completion progress.")
registry.register("status", cmd_status, help_text="Show storage location and current filter.")
