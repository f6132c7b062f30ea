# src/todo_store/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on these Protocols instead of concrete implementations,
so tests can pin ids and time without patching modules.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .state import AppSnapshot


class IdFactory(Protocol):
    """Returns a fresh task id on every call; never repeats within a store's lifetime."""
    def __call__(self) -> str: ...


class Clock(Protocol):
    """Current time in milliseconds since the epoch."""
    def __call__(self) -> int: ...


class StateListener(Protocol):
    """Called once with the new snapshot after every dispatch that changed state."""
    def __call__(self, snapshot: AppSnapshot) -> None: ...
