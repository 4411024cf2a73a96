# src/taskace/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ToggleDirection(StrEnum):
    """
    Which way a completion toggle went.

    Only COMPLETED (incomplete -> complete) should trigger a celebratory cue.
    """

    COMPLETED = "completed"
    REOPENED = "reopened"


class TaskEventKind(StrEnum):
    LOADED = "loaded"
    ADDED = "added"
    TOGGLED = "toggled"
    EDITED = "edited"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    completed: bool = False

    def to_record(self) -> dict[str, object]:
        return {"id": self.id, "text": self.text, "completed": self.completed}


@dataclass(frozen=True, slots=True)
class EditSession:
    """The single open edit: which task, and its uncommitted working copy."""

    task_id: int
    draft: str


@dataclass(frozen=True, slots=True)
class TaskEvent:
    kind: TaskEventKind
    tasks: tuple[Task, ...]
    task: Task | None = None
    direction: ToggleDirection | None = None
