# src/taskace/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from ..theme import ThemePreference
from .ports import KeyValueStore


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: object

    kv: KeyValueStore
    task_store: TaskStore
    theme: ThemePreference
