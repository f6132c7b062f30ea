# src/todo_store/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

TaskId = str


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do item.

    Notes:
    - id and title never change after creation; done is the only field a
      transition may flip (by building a replacement Task).
    - created_at is milliseconds since the epoch.
    """

    id: TaskId
    title: str
    created_at: int
    done: bool = False


# Most-recently-created first.
TaskList = tuple[Task, ...]
