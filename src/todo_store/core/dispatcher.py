# src/todo_store/core/dispatcher.py

"""
Dispatch coordinator.

TodoStore is the only owner of state. One dispatch = one atomic transition:
- the full next snapshot (tasks + UI flags) is computed first,
- then published in a single assignment,
- then listeners are notified once with that snapshot.

Cross-store rule: a ToggleTask that moves a task from open to done also
raises the "task completed" banner in the same transition.

Not thread-safe. Callers serialize dispatch; dispatches made from inside a
listener are applied immediately but their notifications are queued behind
the current round, so every listener sees snapshots in dispatch order.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, replace

from ..notifications import flag_store
from ..tasks import task_store
from ..tasks.task_models import TaskId, TaskList
from .actions import (
    Action,
    AddTask,
    ClearCompleted,
    DismissDoneNotification,
    DismissInfoBanner,
    RemoveTask,
    ShowDoneNotification,
    ToggleDarkMode,
    ToggleTask,
)
from .ids import new_task_id, now_ms
from .ports import Clock, IdFactory, StateListener
from .state import AppSnapshot, completed_tasks, initial_snapshot, open_tasks

logger = logging.getLogger(__name__)

Unsubscribe = Callable[[], None]


@dataclass(frozen=True, slots=True)
class DispatchResult:
    snapshot: AppSnapshot
    changed: bool
    # Id of the task created by AddTask (None for a blank title or other actions).
    task_id: TaskId | None = None
    # True when ToggleTask moved a task from open to done.
    completed: bool = False


def apply_action(
    snapshot: AppSnapshot,
    action: Action,
    *,
    new_id: IdFactory,
    clock: Clock,
) -> DispatchResult:
    """Compute the transition for one action. Does not touch any store."""
    if isinstance(action, AddTask):
        task = task_store.create_task(action.title, new_id=new_id, now_ms=clock)
        if task is None:
            return DispatchResult(snapshot=snapshot, changed=False)
        tasks = task_store.add_task(snapshot.tasks, task)
        return DispatchResult(
            snapshot=replace(snapshot, tasks=tasks),
            changed=True,
            task_id=task.id,
        )

    if isinstance(action, ToggleTask):
        toggle = task_store.toggle_task(snapshot.tasks, action.task_id)
        if not toggle.found:
            return DispatchResult(snapshot=snapshot, changed=False)
        ui = snapshot.ui
        if toggle.completed:
            ui = flag_store.show_done_notification(ui)
        return DispatchResult(
            snapshot=AppSnapshot(tasks=toggle.tasks, ui=ui),
            changed=True,
            completed=toggle.completed,
        )

    if isinstance(action, RemoveTask):
        return _with_tasks(snapshot, task_store.remove_task(snapshot.tasks, action.task_id))

    if isinstance(action, ClearCompleted):
        return _with_tasks(snapshot, task_store.clear_completed(snapshot.tasks))

    if isinstance(action, ToggleDarkMode):
        return _with_ui(snapshot, flag_store.toggle_dark_mode(snapshot.ui))

    if isinstance(action, DismissInfoBanner):
        return _with_ui(snapshot, flag_store.dismiss_info_banner(snapshot.ui))

    if isinstance(action, ShowDoneNotification):
        return _with_ui(snapshot, flag_store.show_done_notification(snapshot.ui))

    if isinstance(action, DismissDoneNotification):
        return _with_ui(snapshot, flag_store.dismiss_done_notification(snapshot.ui))

    raise TypeError(f"Unsupported action: {action!r}")


def _with_tasks(snapshot: AppSnapshot, tasks: TaskList) -> DispatchResult:
    if tasks is snapshot.tasks:
        return DispatchResult(snapshot=snapshot, changed=False)
    return DispatchResult(snapshot=replace(snapshot, tasks=tasks), changed=True)


def _with_ui(snapshot: AppSnapshot, ui: flag_store.UiFlags) -> DispatchResult:
    if ui is snapshot.ui:
        return DispatchResult(snapshot=snapshot, changed=False)
    return DispatchResult(snapshot=replace(snapshot, ui=ui), changed=True)


class TodoStore:
    """Owns the task list and UI flags; the single path for changing either."""

    def __init__(
        self,
        initial: AppSnapshot | None = None,
        *,
        new_id: IdFactory | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._state = initial if initial is not None else initial_snapshot()
        self._new_id: IdFactory = new_id or new_task_id
        self._clock: Clock = clock or now_ms
        self._listeners: list[StateListener] = []
        self._pending: deque[AppSnapshot] = deque()
        self._notifying = False

    # ---- read interface ----

    @property
    def state(self) -> AppSnapshot:
        return self._state

    @property
    def completed_tasks(self) -> TaskList:
        return completed_tasks(self._state)

    @property
    def open_tasks(self) -> TaskList:
        return open_tasks(self._state)

    # ---- dispatch ----

    def dispatch(self, action: Action) -> DispatchResult:
        result = apply_action(self._state, action, new_id=self._new_id, clock=self._clock)
        logger.debug(
            "dispatch %s changed=%s tasks=%d",
            type(action).__name__,
            result.changed,
            len(result.snapshot.tasks),
        )
        if not result.changed:
            return result

        self._state = result.snapshot
        self._pending.append(result.snapshot)
        if not self._notifying:
            self._drain()
        return result

    # ---- change notification ----

    def subscribe(self, listener: StateListener) -> Unsubscribe:
        self._listeners.append(listener)
        logger.debug("Listener added: %s (total=%d)", _name(listener), len(self._listeners))

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
                logger.debug("Listener removed: %s", _name(listener))

        return unsubscribe

    def _drain(self) -> None:
        self._notifying = True
        try:
            while self._pending:
                snapshot = self._pending.popleft()
                # Copy: listeners may unsubscribe while being notified.
                for listener in list(self._listeners):
                    try:
                        listener(snapshot)
                    except Exception:
                        logger.exception("Listener %s failed.", _name(listener))
        finally:
            self._notifying = False


def _name(listener: object) -> str:
    return str(getattr(listener, "__qualname__", listener))
