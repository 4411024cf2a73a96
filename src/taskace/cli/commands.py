# src/taskace/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..connectors.render import render_state
from ..core.state import AppState
from ..tasks.task_models import Task, ToggleDirection

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Any other line adds a task (or commits the text being edited).")
        return "\n".join(lines)


registry = CommandRegistry()


def _task_by_row(state: AppState, raw: str) -> Task | None:
    """Resolve a 1-based row number as shown in the list ("3" or "3.")."""
    raw = raw.rstrip(".")
    if not raw.isdecimal():
        return None
    row = int(raw)
    tasks = state.task_store.tasks
    if row < 1 or row > len(tasks):
        return None
    return tasks[row - 1]


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    done, total = state.task_store.counts()
    backend = str(getattr(state.settings, "store_backend", "sqlite"))
    err = state.task_store.last_persist_error or state.theme.last_persist_error
    persist = "OK" if err is None else f"FAILING ({err})"
    return (
        "Status:\n"
        f"  Tasks: {done}/{total} done\n"
        f"  Theme: {state.theme.value}\n"
        f"  Storage: {backend} ({persist})"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_state(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    task = state.task_store.add_task(" ".join(args))
    if task is None:
        return "Task text required."
    return f"Added #{len(state.task_store)}."


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done <n>   -> toggle completion of row n
    """
    if len(args) != 1:
        return "Usage: /done <n>"
    task = _task_by_row(state, args[0])
    if task is None:
        return f"No task #{args[0]}."
    direction = state.task_store.toggle_complete(task.id)
    if direction is ToggleDirection.COMPLETED:
        return f"Completed #{args[0].rstrip('.')}."
    return f"Reopened #{args[0].rstrip('.')}."


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <n>          -> start editing row n (next plain line commits)
    /edit <n> <text>   -> replace the text of row n in one step
    """
    if not args:
        return "Usage: /edit <n> [new text]"
    task = _task_by_row(state, args[0])
    if task is None:
        return f"No task #{args[0]}."

    draft = state.task_store.begin_edit(task.id)
    if len(args) == 1:
        return f"Editing #{args[0].rstrip('.')}: {draft}\nType the new text and press Enter (/cancel to abort)."

    state.task_store.update_draft(" ".join(args[1:]))
    state.task_store.commit_edit()
    return f"Updated #{args[0].rstrip('.')}."


def cmd_cancel(state: AppState, args: list[str]) -> str:
    if state.task_store.editing is None:
        return "Nothing to cancel."
    state.task_store.cancel_edit()
    return "Edit cancelled."


def cmd_rm(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rm <n>"
    task = _task_by_row(state, args[0])
    if task is None:
        return f"No task #{args[0]}."
    state.task_store.delete_task(task.id)
    return f"Removed: {task.text}"


def cmd_theme(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /theme            -> toggle dark/light
    /theme <name>     -> set dark or light
    """
    before = state.theme.value
    if not args:
        after = state.theme.toggle()
    else:
        arg = args[0].lower()
        if arg not in ("dark", "light"):
            return "Usage: /theme [dark|light]"
        after = state.theme.set(arg)

    if after == before:
        return f"Theme is already {after}."

    logger.debug("Theme changed %s -> %s", before, after)
    if emit:
        emit(f"Theme: {after}.")
    return render_state(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts, theme and storage state.")
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register("done", cmd_done, help_text="Toggle completion: /done <n>.", aliases=["x"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <n> [new text].", aliases=["e"])
registry.register("cancel", cmd_cancel, help_text="Cancel the current edit.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <n>.", aliases=["del"])
registry.register("theme", cmd_theme, help_text="Switch theme: /theme [dark|light].")
