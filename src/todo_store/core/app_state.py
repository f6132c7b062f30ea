# src/todo_store/core/app_state.py

from __future__ import annotations

from dataclasses import dataclass

from .dispatcher import TodoStore


@dataclass(slots=True)
class AppState:
    # Settings live on the state so commands/connectors need a single handle.
    settings: object
    store: TodoStore
