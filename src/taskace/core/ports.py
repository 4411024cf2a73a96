# src/taskace/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage backends and front-ends swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import TaskEvent

TaskListener = Callable[[TaskEvent], None]
# Receives every collection change; the front-end re-renders from event.tasks.


class KeyValueStore(Protocol):
    """
    Durable string -> string store.

    get() returns None for a missing key.
    set() raises PersistenceWriteError when the backend rejects the write.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def count_keys(self) -> int: ...
    def close(self) -> None: ...
