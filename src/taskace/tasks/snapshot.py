# src/taskace/tasks/snapshot.py

"""
Snapshot codec for the persisted task list.

Wire format (key "tasks"): a JSON array of records
    {"id": <int>, "text": <str>, "completed": <bool>}
in collection order. Extra keys in a record are ignored.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from ..errors import MalformedSnapshotError
from .task_models import Task

logger = logging.getLogger(__name__)


def encode_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([t.to_record() for t in tasks], ensure_ascii=False)


def _record_to_task(index: int, raw: Any) -> Task | None:
    """Convert one record; returns None (and logs why) for an unusable one."""
    if not isinstance(raw, dict):
        logger.warning("Dropping snapshot record #%d: not an object", index)
        return None

    tid = raw.get("id")
    # bool is an int subclass; reject it explicitly.
    if not isinstance(tid, int) or isinstance(tid, bool):
        logger.warning("Dropping snapshot record #%d: invalid id %r", index, tid)
        return None

    text = raw.get("text")
    if not isinstance(text, str) or not text.strip():
        logger.warning("Dropping snapshot record #%d (id=%s): empty or invalid text", index, tid)
        return None

    completed = raw.get("completed")
    if not isinstance(completed, bool):
        logger.warning("Dropping snapshot record #%d (id=%s): invalid completed flag", index, tid)
        return None

    return Task(id=tid, text=text, completed=completed)


def decode_tasks(raw: str) -> list[Task]:
    """
    Parse a persisted snapshot.

    Raises MalformedSnapshotError only when the payload is not a JSON array.
    Inside the array, unusable records (wrong types, blank text) are dropped
    and only the first record of a repeated id is kept, so one bad row never
    costs the rest of the list.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MalformedSnapshotError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedSnapshotError(f"expected a list, got {type(data).__name__}")

    tasks: list[Task] = []
    seen: set[int] = set()
    for index, item in enumerate(data):
        task = _record_to_task(index, item)
        if task is None:
            continue
        if task.id in seen:
            logger.warning("Dropping snapshot record #%d: duplicate id %s", index, task.id)
            continue
        seen.add(task.id)
        tasks.append(task)
    return tasks
