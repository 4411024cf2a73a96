# tests/test_bootstrap.py

from __future__ import annotations

from taskace.cli.bootstrap import create_initial_state
from taskace.storage import JsonFileKeyValueStore, SQLiteKeyValueStore


def test_state_is_hydrated_from_sqlite_backend(settings) -> None:
    first = create_initial_state(settings=settings)
    assert isinstance(first.kv, SQLiteKeyValueStore)
    assert first.task_store.tasks == ()
    assert first.theme.value == "dark"

    first.task_store.add_task("persist me")
    first.theme.toggle()

    second = create_initial_state(settings=settings)
    assert [t.text for t in second.task_store.tasks] == ["persist me"]
    assert second.theme.value == "light"


def test_json_backend_is_selectable(settings) -> None:
    settings.store_backend = "json"
    state = create_initial_state(settings=settings)
    assert isinstance(state.kv, JsonFileKeyValueStore)

    state.task_store.add_task("in json")
    assert settings.store_json_path.exists()


def test_default_theme_comes_from_settings(settings, kv) -> None:
    settings.default_theme = "light"
    state = create_initial_state(settings=settings, kv=kv)
    assert state.theme.value == "light"
