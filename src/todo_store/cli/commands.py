# src/todo_store/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..connectors.console_view import render_screen, theme_label
from ..core.actions import DismissDoneNotification, DismissInfoBanner, ToggleDarkMode
from ..core.app_state import AppState
from ..notifications.flag_store import Banner
from ..tasks import task_api

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/add, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # Commands that take the rest of the line verbatim as a single argument.
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if raw:
            self._raw.update([key, *(a.lower() for a in aliases)])

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        if name in self._raw:
            args = [rest] if rest.strip() else []
        else:
            args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    # Registered raw: args holds the title exactly as typed.
    title = args[0] if args else ""
    task_id = task_api.add_task(state.store, title)
    if task_id is None:
        return "Nothing to add: the title is empty."
    return f"Added: {title.strip()}"


def cmd_list(state: AppState, args: list[str]) -> str:
    settings = state.settings
    return render_screen(
        state.store.state,
        app_name=str(getattr(settings, "app_name", "todo")),
        color=bool(getattr(settings, "color", False)),
    )


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done 2        -> toggle the 2nd task in the list
    /done <id>     -> toggle by task id
    Toggling a done task reopens it.
    """
    if not args:
        return "Usage: /done <number|id>"

    task = task_api.resolve_task_ref(state.store.state.tasks, args[0])
    if task is None:
        return f"No task matches '{args[0]}'."

    if task_api.toggle_task(state.store, task.id):
        return f"Marked done: {task.title}"
    return f"Reopened: {task.title}"


def cmd_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /rm <number|id>"

    task = task_api.resolve_task_ref(state.store.state.tasks, args[0])
    if task is None:
        return f"No task matches '{args[0]}'."

    task_api.remove_task(state.store, task.id)
    return f"Removed: {task.title}"


def cmd_clear(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    done = state.store.completed_tasks
    if emit:
        for task in done:
            emit(f"  - {task.title}")
    n = len(done)
    if not task_api.clear_completed(state.store):
        return "No completed tasks to clear."
    return f"Cleared {n} completed task(s)."


def cmd_dark(state: AppState, args: list[str]) -> str:
    state.store.dispatch(ToggleDarkMode())
    logger.debug("Theme switched to %s", theme_label(state.store.state))
    return f"Theme: {theme_label(state.store.state)}."


def cmd_dismiss(state: AppState, args: list[str]) -> str:
    """
    /dismiss info  -> hide the info banner (for the rest of the session)
    /dismiss done  -> hide the "task completed" banner
    """
    if not args:
        return "Usage: /dismiss info | /dismiss done"

    try:
        banner = Banner(args[0].lower())
    except ValueError:
        return "Usage: /dismiss info | /dismiss done"

    if banner is Banner.INFO:
        changed = state.store.dispatch(DismissInfoBanner()).changed
    else:
        changed = state.store.dispatch(DismissDoneNotification()).changed

    if not changed:
        return f"The {banner.value} banner is not shown."
    return f"Dismissed the {banner.value} banner."


def cmd_status(state: AppState, args: list[str]) -> str:
    snap = state.store.state
    total = len(snap.tasks)
    done = len(state.store.completed_tasks)
    return (
        "Status:\n"
        f"  Tasks: {total} ({total - done} open, {done} done)\n"
        f"  Theme: {theme_label(snap)}\n"
        f"  Info banner: {'shown' if snap.ui.show_info_banner else 'dismissed'}\n"
        f"  Done banner: {'shown' if snap.ui.done_notification_visible else 'hidden'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add <title>.", aliases=["a"], raw=True
)
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register(
    "done", cmd_done, help_text="Toggle a task done/open: /done <number|id>.", aliases=["toggle", "t"]
)
registry.register("rm", cmd_rm, help_text="Remove a task: /rm <number|id>.", aliases=["remove"])
registry.register("clear", cmd_clear, help_text="Remove all completed tasks.")
registry.register("dark", cmd_dark, help_text="Toggle dark mode.")
registry.register("dismiss", cmd_dismiss, help_text="Hide a banner: /dismiss info | /dismiss done.")
registry.register("status", cmd_status, help_text="Show counts, theme and banner state.")
