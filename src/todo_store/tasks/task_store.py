# src/todo_store/tasks/task_store.py

"""
Task list reducers.

Every function takes the current TaskList and returns the next one; nothing is
mutated in place. When an operation has nothing to do, the *same* tuple is
returned, so callers can detect a no-op with `is`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from .task_models import Task, TaskId, TaskList

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TaskToggle:
    tasks: TaskList
    found: bool
    # True only for a false -> true transition.
    completed: bool


def create_task(
    raw_title: str,
    *,
    new_id: Callable[[], TaskId],
    now_ms: Callable[[], int],
) -> Task | None:
    """
    Build a new Task from user input, or None if the title is blank.

    No id is allocated for a blank title.
    """
    title = (raw_title or "").strip()
    if not title:
        return None
    return Task(id=new_id(), title=title, created_at=now_ms(), done=False)


def add_task(tasks: TaskList, task: Task) -> TaskList:
    return (task, *tasks)


def find_task(tasks: TaskList, task_id: TaskId) -> Task | None:
    for t in tasks:
        if t.id == task_id:
            return t
    return None


def toggle_task(tasks: TaskList, task_id: TaskId) -> TaskToggle:
    for i, t in enumerate(tasks):
        if t.id != task_id:
            continue
        flipped = replace(t, done=not t.done)
        out = (*tasks[:i], flipped, *tasks[i + 1 :])
        return TaskToggle(tasks=out, found=True, completed=flipped.done)

    logger.debug("toggle_task: unknown id=%s", task_id)
    return TaskToggle(tasks=tasks, found=False, completed=False)


def remove_task(tasks: TaskList, task_id: TaskId) -> TaskList:
    out = tuple(t for t in tasks if t.id != task_id)
    if len(out) == len(tasks):
        logger.debug("remove_task: unknown id=%s", task_id)
        return tasks
    return out


def clear_completed(tasks: TaskList) -> TaskList:
    out = tuple(t for t in tasks if not t.done)
    if len(out) == len(tasks):
        return tasks
    return out
