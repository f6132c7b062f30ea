# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_store.core.app_state import AppState
from todo_store.core.dispatcher import TodoStore

from .fakes import CountingIds, FakeClock, RecordingListener


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        dark_mode=False,
        show_info_banner=True,
        color=False,
        id_mode="sequential",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def ids() -> CountingIds:
    return CountingIds()


@pytest.fixture()
def store(ids: CountingIds, clock: FakeClock) -> TodoStore:
    return TodoStore(new_id=ids, clock=clock)


@pytest.fixture()
def listener(store: TodoStore) -> RecordingListener:
    rec = RecordingListener()
    store.subscribe(rec)
    return rec


@pytest.fixture()
def state(settings: SimpleNamespace, store: TodoStore) -> AppState:
    return AppState(settings=settings, store=store)
