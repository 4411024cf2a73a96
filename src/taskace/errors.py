# src/taskace/errors.py

from __future__ import annotations


class TaskAceError(Exception):
    """Base class for taskace errors."""


class MalformedSnapshotError(TaskAceError, ValueError):
    """Persisted task snapshot cannot be parsed into a valid collection."""


class PersistenceWriteError(TaskAceError):
    """A key-value backend rejected or failed a write."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"write failed for key={key!r}: {message}")
        self.key = key
