# src/todo_store/core/ids.py

from __future__ import annotations

import itertools
import secrets
import time

from .ports import IdFactory

# URL-safe alphabet, 64 symbols.
_ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"
_ID_SIZE = 21


def new_task_id() -> str:
    """Random 21-char token; ~126 bits, independent of the clock."""
    return "".join(secrets.choice(_ALPHABET) for _ in range(_ID_SIZE))


def sequential_ids(prefix: str = "t") -> IdFactory:
    """Deterministic factory: t1, t2, ... Unique for as long as the factory lives."""
    counter = itertools.count(1)

    def _next() -> str:
        return f"{prefix}{next(counter)}"

    return _next


def now_ms() -> int:
    return time.time_ns() // 1_000_000
