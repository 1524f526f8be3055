# src/taskpad/cli/render.py

"""Plain-text rendering of a ViewState for the console connector."""

from __future__ import annotations

from datetime import datetime

from ..core.intents import ViewState
from ..tasks.task_filters import TaskSummary, empty_state_message
from ..tasks.task_models import Task

PROGRESS_BAR_WIDTH = 20

_PRIORITY_MARK = {
    "low": "low",
    "medium": "med",
    "high": "HIGH",
}


def format_relative_date(created_at: datetime, now: datetime | None = None) -> str:
    """'Today', 'Yesterday', 'N days ago' within a week, else the calendar date."""
    if now is None:
        now = datetime.now(created_at.tzinfo)
    days = int((now - created_at).total_seconds() // 86400)
    if days <= 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days} days ago"
    return created_at.astimezone().date().isoformat()


def render_task_line(index: int, task: Task, now: datetime | None = None) -> str:
    box = "[x]" if task.completed else "[ ]"
    parts = [f"{index:>3}. {box} {task.text}", f"({_PRIORITY_MARK[task.priority.value]})"]
    if task.category:
        parts.append(f"#{task.category}")
    parts.append(f"- {format_relative_date(task.created_at, now)}")
    return " ".join(parts)


def render_progress(s: TaskSummary) -> str:
    filled = round(s.progress * PROGRESS_BAR_WIDTH)
    bar = "#" * filled + "-" * (PROGRESS_BAR_WIDTH - filled)
    return f"Progress: {s.completed_count} of {s.total_count} completed [{bar}] {s.progress:.0%}"


def render_view(view: ViewState, now: datetime | None = None) -> str:
    lines: list[str] = []
    if view.summary.total_count > 0:
        lines.append(render_progress(view.summary))
    lines.append(f"Filter: {view.filter_mode.value}")

    if not view.visible:
        headline, hint = empty_state_message(view.filter_mode)
        lines.append(f"  {headline}. {hint}")
        return "\n".join(lines)

    for i, task in enumerate(view.visible, start=1):
        lines.append(render_task_line(i, task, now))
    return "\n".join(lines)
