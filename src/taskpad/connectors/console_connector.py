# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import add_plain_text
from ..cli.commands import registry as command_registry
from ..cli.render import render_view
from ..core.state import AppState
from ..tasks import task_api

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Route one console line to a reply.

    - "/command ..." goes to the command registry
    - plain text is added verbatim (no !priority / #category parsing)
    - empty input yields None (nothing to print)
    """
    line = line.strip()
    if not line:
        return None

    try:
        reply = command_registry.handle(state, line)
        if reply is None:
            reply = add_plain_text(state, line)
    except Exception:
        logger.exception("Command handler crashed.")
        reply = "Internal error while handling a command."
    return reply


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.task_store))
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskpad"))

    write(f"[{app_name}] Type a task to add it. Use /help for commands. Use /exit to quit.")
    write(render_view(task_api.current_view(state)))

    while True:
        try:
            user_input = read_line("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            write(reply)

    logger.info("Console connector finished.")
