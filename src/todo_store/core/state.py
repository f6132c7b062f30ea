# src/todo_store/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..notifications.flag_store import UiFlags
from ..tasks.task_models import TaskList


@dataclass(frozen=True, slots=True)
class AppSnapshot:
    """Immutable view of both stores at one point in time."""

    tasks: TaskList = ()
    ui: UiFlags = field(default_factory=UiFlags)


def initial_snapshot(*, dark_mode: bool = False, show_info_banner: bool = True) -> AppSnapshot:
    """Fresh session: no tasks, done banner hidden."""
    return AppSnapshot(
        tasks=(),
        ui=UiFlags(dark_mode=dark_mode, show_info_banner=show_info_banner),
    )


# ---- selectors (derived views, computed on read) ----


def completed_tasks(snapshot: AppSnapshot) -> TaskList:
    return tuple(t for t in snapshot.tasks if t.done)


def open_tasks(snapshot: AppSnapshot) -> TaskList:
    return tuple(t for t in snapshot.tasks if not t.done)


def has_completed(snapshot: AppSnapshot) -> bool:
    return any(t.done for t in snapshot.tasks)
