"""
taskace: a single-user task list editor.

Components:
- tasks/: data structures, snapshot codec and the TaskStore
- storage/: key-value backends (SQLite, JSON file)
- theme.py: dark/light preference persisted next to the tasks
- cli/ + connectors/: console front-end and composition root
"""

__version__ = "0.1.0"
