# src/todo_store/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.app_state import AppState
from ..core.state import AppSnapshot
from .console_view import render_screen

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _as_command(line: str) -> str:
    """Plain text is shorthand for /add."""
    if line.startswith("/"):
        return line
    return f"/add {line}"


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    settings = state.settings
    app_name = str(getattr(settings, "app_name", "todo"))
    color = bool(getattr(settings, "color", True))

    def redraw(snapshot: AppSnapshot) -> None:
        write(render_screen(snapshot, app_name=app_name, color=color))

    def emit(text: str) -> None:
        write(text)

    logger.info("Console connector started.")
    redraw(state.store.state)
    unsubscribe = state.store.subscribe(redraw)

    try:
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

            if not user_input:
                continue

            if user_input.lower() in EXIT_COMMANDS:
                logger.info("Console exit command received.")
                break

            try:
                reply = command_registry.handle(state, _as_command(user_input), emit=emit)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply:
                write(reply)
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
