"""
Key-value backends.

Components:
- sqlite_store.py: SQLite-backed store (default)
- json_store.py: single JSON file with atomic replace
"""

from .json_store import JsonFileKeyValueStore
from .sqlite_store import SQLiteKeyValueStore

__all__ = ["JsonFileKeyValueStore", "SQLiteKeyValueStore"]
