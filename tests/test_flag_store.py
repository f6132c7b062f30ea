# tests/test_flag_store.py

from __future__ import annotations

from todo_store.notifications import flag_store
from todo_store.notifications.flag_store import Banner, UiFlags


def test_defaults() -> None:
    flags = UiFlags()

    assert flags.dark_mode is False
    assert flags.show_info_banner is True
    assert flags.done_notification_visible is False


def test_toggle_dark_mode_flips_both_ways() -> None:
    flags = UiFlags()

    dark = flag_store.toggle_dark_mode(flags)
    assert dark.dark_mode is True
    assert flag_store.toggle_dark_mode(dark).dark_mode is False


def test_dismiss_info_banner_is_one_way() -> None:
    flags = flag_store.dismiss_info_banner(UiFlags())
    assert flags.show_info_banner is False

    # already dismissed -> same object
    assert flag_store.dismiss_info_banner(flags) is flags


def test_done_notification_state_machine() -> None:
    hidden = UiFlags()

    visible = flag_store.show_done_notification(hidden)
    assert visible.done_notification_visible is True

    # another completion while visible stays visible
    assert flag_store.show_done_notification(visible) is visible

    back = flag_store.dismiss_done_notification(visible)
    assert back.done_notification_visible is False
    assert flag_store.dismiss_done_notification(back) is back


def test_flag_transitions_leave_other_flags_alone() -> None:
    flags = UiFlags(dark_mode=True, show_info_banner=False, done_notification_visible=False)

    out = flag_store.show_done_notification(flags)

    assert out.dark_mode is True
    assert out.show_info_banner is False


def test_banner_values() -> None:
    assert Banner("info") is Banner.INFO
    assert Banner("done") is Banner.DONE
