# src/taskace/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- picks the key-value backend,
- wires TaskStore and ThemePreference into AppState and hydrates both.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage import JsonFileKeyValueStore, SQLiteKeyValueStore
from ..tasks.task_store import TaskStore
from ..theme import ThemePreference

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)


def open_kv_store(settings) -> KeyValueStore:
    backend = str(getattr(settings, "store_backend", "sqlite"))
    if backend == "json":
        return JsonFileKeyValueStore(settings.store_json_path)
    return SQLiteKeyValueStore(settings.store_db_path)


def create_initial_state(*, settings=None, kv: KeyValueStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Both the settings and the key-value store are injectable for tests.
    Reads the persisted tasks and theme before returning, so nothing is shown
    to the user until hydration is done.
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        kv = open_kv_store(settings)

    task_store = TaskStore(kv)
    theme = ThemePreference(kv, default=str(getattr(settings, "default_theme", "dark")))

    task_store.initialize()
    theme.load()
    logger.info("State ready tasks=%d theme=%s", len(task_store), theme.value)

    return AppState(settings=settings, kv=kv, task_store=task_store, theme=theme)
