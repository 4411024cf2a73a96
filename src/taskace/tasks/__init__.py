"""
Task subsystem.

Components:
- task_models.py: data structures (Task, EditSession, TaskEvent, ToggleDirection)
- snapshot.py: JSON codec for the persisted "tasks" record list
- task_store.py: in-memory collection with write-through persistence
"""
