# src/todo_store/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.actions import AddTask, ClearCompleted, RemoveTask, ToggleTask
from ..core.dispatcher import TodoStore
from .task_models import Task, TaskId, TaskList
from .task_store import find_task

logger = logging.getLogger(__name__)


def add_task(store: TodoStore, title: str) -> TaskId | None:
    """
    Convenience helper: add a task and return its id.
    Returns None when the title is blank (nothing is added).
    """
    result = store.dispatch(AddTask(title=title))
    if result.task_id is not None:
        logger.info("Task added id=%s", result.task_id)
    return result.task_id


def toggle_task(store: TodoStore, task_id: TaskId) -> bool:
    """Flip a task; True only when it just became done."""
    result = store.dispatch(ToggleTask(task_id=task_id))
    if result.completed:
        logger.info("Task completed id=%s", task_id)
    return result.completed


def remove_task(store: TodoStore, task_id: TaskId) -> bool:
    return store.dispatch(RemoveTask(task_id=task_id)).changed


def clear_completed(store: TodoStore) -> bool:
    return store.dispatch(ClearCompleted()).changed


def resolve_task_ref(tasks: TaskList, ref: str) -> Task | None:
    """
    Resolve what a user typed into a task.

    Accepts a 1-based position in `tasks` or an exact task id.
    """
    ref = (ref or "").strip()
    if not ref:
        return None

    if ref.isdigit():
        idx = int(ref) - 1
        if 0 <= idx < len(tasks):
            return tasks[idx]

    return find_task(tasks, ref)
