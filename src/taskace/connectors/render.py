# src/taskace/connectors/render.py

"""Plain-text rendering of the task list for the console.

Two ANSI palettes, one per theme. Colour is applied only when enabled
(the console connector turns it off for non-TTY output).
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from ..core.state import AppState
from ..tasks.task_models import EditSession, Task

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
STRIKE = "\033[9m"

PALETTES: dict[str, dict[str, str]] = {
    "dark": {
        "header": "\033[38;5;111m",
        "index": "\033[38;5;245m",
        "text": "\033[38;5;255m",
        "done": "\033[38;5;114m",
        "editing": "\033[38;5;221m",
    },
    "light": {
        "header": "\033[38;5;25m",
        "index": "\033[38;5;240m",
        "text": "\033[38;5;16m",
        "done": "\033[38;5;28m",
        "editing": "\033[38;5;130m",
    },
}

CHECK = "✓"


def color(text: str, *styles: str, enabled: bool = True) -> str:
    if not enabled or not styles:
        return text
    return "".join(styles) + text + RESET


def render_tasks(
    tasks: Sequence[Task],
    *,
    theme: str = "dark",
    use_color: bool = True,
    editing: EditSession | None = None,
    title: str = "Tasks to Ace",
) -> str:
    """
    Render the list as a small table: row number, check box, text.

    The row being edited shows its working copy instead of the stored text.
    An empty list renders only the title and a hint.
    """
    pal = PALETTES.get(theme, PALETTES["dark"])
    lines = [color(title, pal["header"], BOLD, enabled=use_color)]

    if not tasks:
        lines.append(color("  (no tasks yet: type a task and press Enter)", DIM, enabled=use_color))
        return "\n".join(lines)

    width = len(str(len(tasks)))
    done = sum(1 for t in tasks if t.completed)
    for row, task in enumerate(tasks, start=1):
        idx = color(f"{row:>{width}}.", pal["index"], enabled=use_color)
        box = color(f"[{CHECK}]", pal["done"], enabled=use_color) if task.completed else "[ ]"
        if editing is not None and editing.task_id == task.id:
            body = color(f"{editing.draft}_  (editing)", pal["editing"], enabled=use_color)
        elif task.completed:
            body = color(task.text, pal["done"], STRIKE, enabled=use_color)
        else:
            body = color(task.text, pal["text"], enabled=use_color)
        lines.append(f"  {idx} {box} {body}")

    lines.append(color(f"  {done}/{len(tasks)} done", DIM, enabled=use_color))
    return "\n".join(lines)


def render_celebration(*, theme: str = "dark", use_color: bool = True) -> str:
    pal = PALETTES.get(theme, PALETTES["dark"])
    burst = "* . ✨ . * \U0001f389 * . ✨ . *"
    return color(f"  {burst}  Nice work!  {burst}", pal["done"], BOLD, enabled=use_color)


def use_color_for(state: AppState) -> bool:
    if not getattr(state.settings, "console_color", False):
        return False
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


def render_state(state: AppState) -> str:
    store = state.task_store
    return render_tasks(
        store.tasks,
        theme=state.theme.value,
        use_color=use_color_for(state),
        editing=store.editing,
        title=str(getattr(state.settings, "app_name", "Tasks to Ace")),
    )
