# tests/test_dispatcher.py

from __future__ import annotations

import logging

import pytest

from todo_store.core.actions import (
    AddTask,
    ClearCompleted,
    DismissDoneNotification,
    DismissInfoBanner,
    RemoveTask,
    ShowDoneNotification,
    ToggleDarkMode,
    ToggleTask,
)
from todo_store.core.dispatcher import TodoStore
from todo_store.core.ids import new_task_id, sequential_ids
from todo_store.core.state import AppSnapshot, initial_snapshot

from .fakes import CountingIds, FakeClock, RecordingListener


def test_add_task_prepends_with_done_false(store: TodoStore, clock: FakeClock) -> None:
    first = store.dispatch(AddTask("first"))
    second = store.dispatch(AddTask("second"))

    tasks = store.state.tasks
    assert len(tasks) == 2
    assert tasks[0].id == second.task_id
    assert tasks[0].title == "second"
    assert tasks[0].done is False
    assert tasks[0].created_at == clock.now
    assert tasks[1].id == first.task_id


@pytest.mark.parametrize("title", ["", "   "])
def test_blank_add_is_noop(
    store: TodoStore, ids: CountingIds, listener: RecordingListener, title: str
) -> None:
    store.dispatch(AddTask("keep"))
    before = store.state

    result = store.dispatch(AddTask(title))

    assert result.changed is False
    assert result.task_id is None
    assert store.state is before
    assert ids.issued == ["id1"]
    assert len(listener.snapshots) == 1


def test_ids_unique_within_one_clock_tick() -> None:
    # Real id generator, frozen clock: uniqueness must not depend on time.
    clock = FakeClock()
    store = TodoStore(new_id=new_task_id, clock=clock)

    for i in range(200):
        store.dispatch(AddTask(f"task {i}"))

    ids = [t.id for t in store.state.tasks]
    assert len(set(ids)) == 200
    assert {t.created_at for t in store.state.tasks} == {clock.now}


def test_ids_never_reused_across_add_remove_cycles() -> None:
    store = TodoStore(new_id=sequential_ids(), clock=FakeClock())
    seen: set[str] = set()

    for _ in range(20):
        task_id = store.dispatch(AddTask("cycle")).task_id
        assert task_id is not None
        assert task_id not in seen
        seen.add(task_id)
        store.dispatch(RemoveTask(task_id))

    assert store.state.tasks == ()


def test_toggle_twice_restores_done(store: TodoStore) -> None:
    task_id = store.dispatch(AddTask("a")).task_id
    assert task_id is not None
    original = store.state.tasks[0].done

    store.dispatch(ToggleTask(task_id))
    store.dispatch(ToggleTask(task_id))

    assert store.state.tasks[0].done is original


def test_completion_raises_done_banner_atomically(store: TodoStore, listener: RecordingListener) -> None:
    task_id = store.dispatch(AddTask("a")).task_id
    assert task_id is not None

    result = store.dispatch(ToggleTask(task_id))

    assert result.completed is True
    assert store.state.tasks[0].done is True
    assert store.state.ui.done_notification_visible is True
    # one notification for the add, one for the toggle; the toggle snapshot
    # already carries both changes
    assert len(listener.snapshots) == 2
    last = listener.snapshots[-1]
    assert last.tasks[0].done is True
    assert last.ui.done_notification_visible is True


def test_reopening_does_not_touch_done_banner(store: TodoStore) -> None:
    task_id = store.dispatch(AddTask("a")).task_id
    assert task_id is not None
    store.dispatch(ToggleTask(task_id))
    store.dispatch(DismissDoneNotification())

    result = store.dispatch(ToggleTask(task_id))

    assert result.completed is False
    assert store.state.tasks[0].done is False
    assert store.state.ui.done_notification_visible is False


def test_reopening_keeps_visible_banner_visible(store: TodoStore) -> None:
    task_id = store.dispatch(AddTask("a")).task_id
    assert task_id is not None
    store.dispatch(ToggleTask(task_id))

    store.dispatch(ToggleTask(task_id))

    assert store.state.ui.done_notification_visible is True


def test_second_completion_keeps_banner_visible(store: TodoStore) -> None:
    a = store.dispatch(AddTask("a")).task_id
    b = store.dispatch(AddTask("b")).task_id
    assert a is not None and b is not None

    store.dispatch(ToggleTask(a))
    result = store.dispatch(ToggleTask(b))

    assert result.completed is True
    assert store.state.ui.done_notification_visible is True


def test_clear_completed_keeps_open_tasks_in_order(store: TodoStore) -> None:
    for title in ["a", "b", "c", "d"]:
        store.dispatch(AddTask(title))
    # list is d, c, b, a
    by_title = {t.title: t.id for t in store.state.tasks}
    store.dispatch(ToggleTask(by_title["c"]))
    store.dispatch(ToggleTask(by_title["a"]))

    first = store.dispatch(ClearCompleted())
    second = store.dispatch(ClearCompleted())

    assert first.changed is True
    assert second.changed is False
    assert [t.title for t in store.state.tasks] == ["d", "b"]


def test_remove_unknown_id_leaves_list_unchanged(store: TodoStore, listener: RecordingListener) -> None:
    store.dispatch(AddTask("a"))
    before = store.state

    result = store.dispatch(RemoveTask("nope"))

    assert result.changed is False
    assert store.state == before
    assert len(listener.snapshots) == 1


def test_toggle_unknown_id_is_noop(store: TodoStore, listener: RecordingListener) -> None:
    result = store.dispatch(ToggleTask("nope"))

    assert result.changed is False
    assert store.state.ui.done_notification_visible is False
    assert listener.snapshots == []


def test_buy_milk_scenario(store: TodoStore) -> None:
    assert store.state.tasks == ()

    task_id = store.dispatch(AddTask("Buy milk")).task_id
    assert task_id is not None
    assert [(t.title, t.done) for t in store.state.tasks] == [("Buy milk", False)]

    store.dispatch(ToggleTask(task_id))
    assert store.state.tasks[0].done is True
    assert store.state.ui.done_notification_visible is True

    store.dispatch(DismissDoneNotification())
    assert store.state.ui.done_notification_visible is False

    store.dispatch(ClearCompleted())
    assert store.state.tasks == ()


def test_ui_flag_actions(store: TodoStore) -> None:
    store.dispatch(ToggleDarkMode())
    store.dispatch(DismissInfoBanner())
    store.dispatch(ShowDoneNotification())

    ui = store.state.ui
    assert ui.dark_mode is True
    assert ui.show_info_banner is False
    assert ui.done_notification_visible is True

    # flag-only actions never touch tasks
    assert store.state.tasks == ()


def test_info_banner_cannot_come_back(store: TodoStore) -> None:
    store.dispatch(DismissInfoBanner())
    again = store.dispatch(DismissInfoBanner())

    assert again.changed is False
    assert store.state.ui.show_info_banner is False


def test_completed_tasks_view_follows_source(store: TodoStore) -> None:
    a = store.dispatch(AddTask("a")).task_id
    b = store.dispatch(AddTask("b")).task_id
    c = store.dispatch(AddTask("c")).task_id
    assert a and b and c

    store.dispatch(ToggleTask(a))
    store.dispatch(ToggleTask(c))

    assert [t.title for t in store.completed_tasks] == ["c", "a"]
    assert [t.title for t in store.open_tasks] == ["b"]

    store.dispatch(RemoveTask(c))
    assert [t.title for t in store.completed_tasks] == ["a"]


def test_listener_called_once_per_changing_dispatch(store: TodoStore, listener: RecordingListener) -> None:
    store.dispatch(AddTask("a"))
    store.dispatch(ToggleDarkMode())
    store.dispatch(DismissDoneNotification())  # already hidden -> no-op

    assert len(listener.snapshots) == 2
    assert listener.snapshots[-1] is store.state


def test_unsubscribe_stops_notifications(store: TodoStore) -> None:
    rec = RecordingListener()
    unsubscribe = store.subscribe(rec)

    store.dispatch(AddTask("a"))
    unsubscribe()
    store.dispatch(AddTask("b"))
    unsubscribe()  # second call is harmless

    assert len(rec.snapshots) == 1


def test_failing_listener_is_isolated(
    store: TodoStore, listener: RecordingListener, caplog: pytest.LogCaptureFixture
) -> None:
    def boom(snapshot: AppSnapshot) -> None:
        raise RuntimeError("listener bug")

    store.subscribe(boom)
    after = RecordingListener()
    store.subscribe(after)

    with caplog.at_level(logging.ERROR, logger="todo_store.core.dispatcher"):
        result = store.dispatch(AddTask("a"))

    assert result.changed is True
    assert len(listener.snapshots) == 1
    assert len(after.snapshots) == 1
    assert "failed" in caplog.text


def test_dispatch_from_listener_is_serialized(store: TodoStore) -> None:
    seen: list[tuple[str, bool]] = []

    def auto_dismiss(snapshot: AppSnapshot) -> None:
        if snapshot.ui.done_notification_visible:
            store.dispatch(DismissDoneNotification())

    def record(snapshot: AppSnapshot) -> None:
        seen.append((snapshot.tasks[0].title, snapshot.ui.done_notification_visible))

    store.subscribe(auto_dismiss)
    store.subscribe(record)

    task_id = store.dispatch(AddTask("a")).task_id
    assert task_id is not None
    store.dispatch(ToggleTask(task_id))

    # add, toggle (banner up), then the nested dismiss, each exactly once and in order
    assert seen == [("a", False), ("a", True), ("a", False)]
    assert store.state.ui.done_notification_visible is False


def test_unknown_action_raises_type_error(store: TodoStore) -> None:
    with pytest.raises(TypeError):
        store.dispatch("AddTask")  # type: ignore[arg-type]


def test_initial_snapshot_from_settings_flags() -> None:
    store = TodoStore(initial_snapshot(dark_mode=True, show_info_banner=False))

    assert store.state.ui.dark_mode is True
    assert store.state.ui.show_info_banner is False
    assert store.state.ui.done_notification_visible is False
