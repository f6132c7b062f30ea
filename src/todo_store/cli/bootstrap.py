# src/todo_store/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the id factory and clock,
- wires a fresh TodoStore into AppState.

Nothing is loaded from disk: every run starts from an empty list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.app_state import AppState
from ..core.dispatcher import TodoStore
from ..core.ids import new_task_id, now_ms, sequential_ids
from ..core.ports import IdFactory
from ..core.state import initial_snapshot

logger = logging.getLogger(__name__)


def _id_factory(settings) -> IdFactory:
    if getattr(settings, "id_mode", "random") == "sequential":
        return sequential_ids()
    return new_task_id


def create_store(settings) -> TodoStore:
    initial = initial_snapshot(
        dark_mode=bool(getattr(settings, "dark_mode", False)),
        show_info_banner=bool(getattr(settings, "show_info_banner", True)),
    )
    store = TodoStore(initial, new_id=_id_factory(settings), clock=now_ms)
    logger.info(
        "TodoStore ready dark_mode=%s info_banner=%s ids=%s",
        initial.ui.dark_mode,
        initial.ui.show_info_banner,
        getattr(settings, "id_mode", "random"),
    )
    return store


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(settings=settings, store=create_store(settings))
