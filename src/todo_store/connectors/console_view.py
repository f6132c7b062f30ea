# src/todo_store/connectors/console_view.py

"""
Plain-text rendering of a snapshot for the console.

Pure functions: snapshot in, string out. Colours are ANSI escapes picked from a
light or dark palette; with color=False every escape is empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.state import AppSnapshot, completed_tasks, has_completed
from ..tasks.task_models import Task, TaskList

INFO_BANNER_TEXT = "Type a title to add a task, or /help for commands. (/dismiss info hides this.)"
DONE_BANNER_TEXT = "Task has been marked as completed. (/dismiss done hides this.)"
EMPTY_TEXT = "No tasks yet. Type a title to add one."
CLEAR_HINT = "Use /clear to remove completed tasks."

SHORT_ID_LEN = 6


def _code(part: str, enabled: bool) -> str:
    return f"\033[{part}m" if enabled else ""


@dataclass(frozen=True, slots=True)
class Palette:
    header: str
    accent: str
    muted: str
    done: str
    banner: str
    reset: str


def palette_for(*, dark_mode: bool, color: bool) -> Palette:
    if dark_mode:
        # bright foregrounds for dark terminals
        return Palette(
            header=_code("1;97", color),
            accent=_code("96", color),
            muted=_code("90", color),
            done=_code("92", color),
            banner=_code("30;106", color),
            reset=_code("0", color),
        )
    return Palette(
        header=_code("1;34", color),
        accent=_code("34", color),
        muted=_code("2", color),
        done=_code("32", color),
        banner=_code("30;47", color),
        reset=_code("0", color),
    )


def theme_label(snapshot: AppSnapshot) -> str:
    return "Dark" if snapshot.ui.dark_mode else "Light"


def format_created_at(created_at_ms: int) -> str:
    return datetime.fromtimestamp(created_at_ms / 1000).astimezone().strftime("%Y-%m-%d %H:%M")


def render_task_line(position: int, task: Task, pal: Palette) -> str:
    mark = f"{pal.done}[x]{pal.reset}" if task.done else "[ ]"
    meta = f"{pal.muted}({task.id[:SHORT_ID_LEN]}, {format_created_at(task.created_at)}){pal.reset}"
    return f"  {position:>2}. {mark} {task.title}  {meta}"


def _positions(tasks: TaskList) -> dict[str, int]:
    return {t.id: i for i, t in enumerate(tasks, start=1)}


def render_screen(snapshot: AppSnapshot, *, app_name: str = "todo", color: bool = True) -> str:
    pal = palette_for(dark_mode=snapshot.ui.dark_mode, color=color)
    lines: list[str] = [f"{pal.header}== {app_name} [{theme_label(snapshot)}] =={pal.reset}"]

    if snapshot.ui.show_info_banner:
        lines.append(f"{pal.banner} i {pal.reset} {INFO_BANNER_TEXT}")
    if snapshot.ui.done_notification_visible:
        lines.append(f"{pal.banner} v {pal.reset} {DONE_BANNER_TEXT}")

    tasks = snapshot.tasks
    lines.append(f"{pal.accent}Tasks ({len(tasks)}){pal.reset}")
    if not tasks:
        lines.append(f"  {pal.muted}{EMPTY_TEXT}{pal.reset}")
    for pos, task in enumerate(tasks, start=1):
        lines.append(render_task_line(pos, task, pal))

    # Done section keeps the numbering of the main list so /done N works from either.
    done = completed_tasks(snapshot)
    positions = _positions(tasks)
    lines.append(f"{pal.accent}Done ({len(done)}){pal.reset}")
    if not done:
        lines.append(f"  {pal.muted}Nothing completed yet.{pal.reset}")
    for task in done:
        lines.append(render_task_line(positions[task.id], task, pal))

    if has_completed(snapshot):
        lines.append(f"{pal.muted}{CLEAR_HINT}{pal.reset}")

    return "\n".join(lines)
