# src/todo_store/notifications/flag_store.py

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class Banner(StrEnum):
    """Banners the presentation layer can ask to dismiss."""

    INFO = "info"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class UiFlags:
    dark_mode: bool = False
    # One-way: nothing sets it back to True during a session.
    show_info_banner: bool = True
    # Set by task completion, cleared only by explicit dismissal.
    done_notification_visible: bool = False


# Each transition returns the same object when the flag already holds the
# target value.


def toggle_dark_mode(flags: UiFlags) -> UiFlags:
    return replace(flags, dark_mode=not flags.dark_mode)


def dismiss_info_banner(flags: UiFlags) -> UiFlags:
    if not flags.show_info_banner:
        return flags
    return replace(flags, show_info_banner=False)


def show_done_notification(flags: UiFlags) -> UiFlags:
    if flags.done_notification_visible:
        return flags
    return replace(flags, done_notification_visible=True)


def dismiss_done_notification(flags: UiFlags) -> UiFlags:
    if not flags.done_notification_visible:
        return flags
    return replace(flags, done_notification_visible=False)
