# src/taskace/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import replace

from ..core.ports import KeyValueStore, TaskListener
from ..errors import MalformedSnapshotError
from .snapshot import decode_tasks, encode_tasks
from .task_models import EditSession, Task, TaskEvent, TaskEventKind, ToggleDirection

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"


class TaskStore:
    """
    In-memory task collection with write-through persistence.

    - The in-memory list is the source of truth for the session.
    - Every mutation writes the full snapshot to the key-value store.
      A failed write is logged and remembered, never rolled back.
    - Ids come from a monotonically increasing counter seeded from the
      highest persisted id, so they never collide.
    - At most one task is being edited at a time (see begin_edit).

    Invalid input never raises: empty text and unknown ids are no-ops.
    """

    def __init__(self, kv: KeyValueStore, *, key: str = TASKS_KEY) -> None:
        self._kv = kv
        self._key = key
        self._tasks: list[Task] = []
        self._next_id = 1
        self._editing: EditSession | None = None
        self._listeners: list[TaskListener] = []
        self.last_persist_error: Exception | None = None

    # ---- hydration ----

    def initialize(self) -> tuple[Task, ...]:
        """Load the persisted snapshot. Missing or malformed data yields an empty list."""
        try:
            raw = self._kv.get(self._key)
        except Exception:
            logger.exception("Failed to read snapshot key=%s; starting empty.", self._key)
            raw = None

        tasks: list[Task] = []
        if raw is not None:
            try:
                tasks = decode_tasks(raw)
            except MalformedSnapshotError as e:
                logger.warning("Ignoring malformed snapshot key=%s: %s", self._key, e)

        self._tasks = tasks
        self._next_id = max((t.id for t in tasks), default=0) + 1
        self._editing = None
        logger.info("TaskStore ready key=%s total=%d next_id=%d", self._key, len(tasks), self._next_id)
        self._emit(TaskEventKind.LOADED)
        return self.tasks

    # ---- low-level helpers ----

    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _persist(self) -> None:
        try:
            self._kv.set(self._key, encode_tasks(self._tasks))
        except Exception as e:
            self.last_persist_error = e
            logger.exception("Failed to persist %d tasks; keeping in-memory state.", len(self._tasks))
            return
        self.last_persist_error = None

    def _emit(
        self,
        kind: TaskEventKind,
        task: Task | None = None,
        direction: ToggleDirection | None = None,
    ) -> None:
        event = TaskEvent(kind=kind, tasks=self.tasks, task=task, direction=direction)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Task listener failed on %s event.", kind.value)

    # ---- read API ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def counts(self) -> tuple[int, int]:
        """Return (completed, total)."""
        return sum(1 for t in self._tasks if t.completed), len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    # ---- notifications ----

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        """Register a change listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- mutations ----

    def add_task(self, raw_text: str) -> Task | None:
        text = (raw_text or "").strip()
        if not text:
            return None

        task = Task(id=self._allocate_id(), text=text, completed=False)
        self._tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        self._persist()
        self._emit(TaskEventKind.ADDED, task)
        return task

    def toggle_complete(self, task_id: int) -> ToggleDirection | None:
        """
        Flip `completed` for task_id.

        Returns the direction so the caller can decide on a celebratory cue,
        or None if no such task exists. An open edit session is left alone.
        """
        idx = self._index_of(task_id)
        if idx is None:
            return None

        task = replace(self._tasks[idx], completed=not self._tasks[idx].completed)
        self._tasks[idx] = task
        direction = ToggleDirection.COMPLETED if task.completed else ToggleDirection.REOPENED
        logger.debug("Task toggled id=%s direction=%s", task_id, direction.value)
        self._persist()
        self._emit(TaskEventKind.TOGGLED, task, direction)
        return direction

    def edit_task(self, task_id: int, new_text: str) -> bool:
        """
        Commit new text for the task currently being edited.

        Requires an open edit session on task_id. Blank text is rejected and
        the session stays open; on success the session is closed.
        """
        session = self._editing
        if session is None or session.task_id != task_id:
            return False

        idx = self._index_of(task_id)
        if idx is None:
            self._editing = None
            return False

        text = (new_text or "").strip()
        if not text:
            logger.debug("Rejected empty edit commit id=%s", task_id)
            return False

        task = replace(self._tasks[idx], text=text)
        self._tasks[idx] = task
        self._editing = None
        logger.debug("Task edited id=%s", task_id)
        self._persist()
        self._emit(TaskEventKind.EDITED, task)
        return True

    def delete_task(self, task_id: int) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            return False

        task = self._tasks.pop(idx)
        if self._editing is not None and self._editing.task_id == task_id:
            self._editing = None
        logger.debug("Task deleted id=%s", task_id)
        self._persist()
        self._emit(TaskEventKind.DELETED, task)
        return True

    # ---- edit session ----

    @property
    def editing(self) -> EditSession | None:
        return self._editing

    def is_editing(self, task_id: int) -> bool:
        return self._editing is not None and self._editing.task_id == task_id

    def begin_edit(self, task_id: int) -> str | None:
        """
        Open an edit session on task_id and return its working copy.

        Any previous session is abandoned without committing.
        Unknown ids return None and leave the current session untouched.
        """
        task = self.get(task_id)
        if task is None:
            return None
        if self._editing is not None and self._editing.task_id != task_id:
            logger.debug("Abandoning uncommitted edit id=%s", self._editing.task_id)
        self._editing = EditSession(task_id=task_id, draft=task.text)
        return task.text

    def update_draft(self, text: str) -> None:
        if self._editing is None:
            return
        self._editing = replace(self._editing, draft=text)

    def commit_edit(self) -> bool:
        if self._editing is None:
            return False
        return self.edit_task(self._editing.task_id, self._editing.draft)

    def cancel_edit(self) -> None:
        self._editing = None
