# src/taskace/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import TaskEvent, TaskEventKind, ToggleDirection
from .render import render_celebration, render_state, use_color_for

logger = logging.getLogger(__name__)

PROMPT = "> "
EDIT_PROMPT = "edit> "


def _make_listener(state: AppState):
    """Re-render after every change; celebrate forward completions only."""
    celebrate = bool(getattr(state.settings, "celebrate", True))

    def on_change(event: TaskEvent) -> None:
        if event.kind is TaskEventKind.LOADED:
            return
        print(render_state(state))
        if celebrate and event.direction is ToggleDirection.COMPLETED:
            print(render_celebration(theme=state.theme.value, use_color=use_color_for(state)))

    return on_change


def _handle_plain_line(state: AppState, line: str) -> None:
    store = state.task_store
    if store.editing is not None:
        store.update_draft(line)
        if not store.commit_edit():
            print("Task text cannot be empty. Type the new text or /cancel.")
        return
    store.add_task(line)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.task_store))
    unsubscribe = state.task_store.subscribe(_make_listener(state))

    def emit(text: str) -> None:
        print(text, flush=True)

    print(render_state(state))
    print("Type a task and press Enter to add it. Use /help for commands, /exit to quit.\n")

    try:
        while True:
            prompt = EDIT_PROMPT if state.task_store.editing is not None else PROMPT
            try:
                user_input = input(prompt).strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                cmd_response = command_registry.handle(state, user_input, emit=emit)
            except Exception:
                logger.exception("Command handler crashed.")
                cmd_response = "Internal error while handling a command."

            if cmd_response is not None:
                print(cmd_response)
                continue

            try:
                _handle_plain_line(state, user_input)
            except Exception:
                logger.exception("Console input handler crashed.")
                print("Internal error while updating the list.")
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
