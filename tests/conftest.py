# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskace.cli.bootstrap import create_initial_state
from taskace.core.state import AppState
from taskace.tasks.task_store import TaskStore

from .fakes import FakeKeyValueStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="Tasks to Ace",
        log_level="INFO",
        data_dir=tmp_path,
        store_backend="sqlite",
        store_db_path=tmp_path / "store.sqlite3",
        store_json_path=tmp_path / "store.json",
        default_theme="dark",
        celebrate=True,
        console_color=False,
    )


@pytest.fixture()
def kv() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture()
def store(kv: FakeKeyValueStore) -> TaskStore:
    s = TaskStore(kv)
    s.initialize()
    return s


@pytest.fixture()
def state(settings: SimpleNamespace, kv: FakeKeyValueStore) -> AppState:
    """AppState wired with the in-memory key-value fake."""
    return create_initial_state(settings=settings, kv=kv)
