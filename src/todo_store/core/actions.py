# src/todo_store/core/actions.py

"""Intents accepted by TodoStore.dispatch (one frozen dataclass per intent)."""

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import TaskId


@dataclass(frozen=True, slots=True)
class AddTask:
    title: str


@dataclass(frozen=True, slots=True)
class ToggleTask:
    task_id: TaskId


@dataclass(frozen=True, slots=True)
class RemoveTask:
    task_id: TaskId


@dataclass(frozen=True, slots=True)
class ClearCompleted:
    pass


@dataclass(frozen=True, slots=True)
class ToggleDarkMode:
    pass


@dataclass(frozen=True, slots=True)
class DismissInfoBanner:
    pass


@dataclass(frozen=True, slots=True)
class ShowDoneNotification:
    pass


@dataclass(frozen=True, slots=True)
class DismissDoneNotification:
    pass


Action = (
    AddTask
    | ToggleTask
    | RemoveTask
    | ClearCompleted
    | ToggleDarkMode
    | DismissInfoBanner
    | ShowDoneNotification
    | DismissDoneNotification
)
