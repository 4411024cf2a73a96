# tests/test_snapshot.py

from __future__ import annotations

import json

import pytest

from taskace.errors import MalformedSnapshotError
from taskace.tasks.snapshot import decode_tasks, encode_tasks
from taskace.tasks.task_models import Task


def test_round_trip_preserves_order_and_fields() -> None:
    tasks = [
        Task(id=3, text="Ship it", completed=False),
        Task(id=1, text="Café ☕ run", completed=True),
        Task(id=2, text="Call mom", completed=False),
    ]
    raw = encode_tasks(tasks)

    assert json.loads(raw)[1] == {"id": 1, "text": "Café ☕ run", "completed": True}
    assert "Café" in raw  # stored as UTF-8, not \u-escaped
    assert decode_tasks(raw) == tasks


def test_empty_list_round_trips() -> None:
    assert encode_tasks([]) == "[]"
    assert decode_tasks("[]") == []


def test_extra_record_keys_are_ignored() -> None:
    raw = json.dumps([{"id": 1, "text": "a", "completed": False, "color": "red"}])
    assert decode_tasks(raw) == [Task(id=1, text="a", completed=False)]


@pytest.mark.parametrize("raw", ["not json", "null", '{"id": 1}', '"tasks"', "42"])
def test_non_list_payloads_are_rejected(raw: str) -> None:
    with pytest.raises(MalformedSnapshotError):
        decode_tasks(raw)


@pytest.mark.parametrize(
    "bad_record",
    [
        1,
        {"text": "no id", "completed": False},
        {"id": "9", "text": "string id", "completed": False},
        {"id": True, "text": "bool id", "completed": False},
        {"id": 1.5, "text": "float id", "completed": False},
        {"id": 9, "text": "   ", "completed": False},
        {"id": 9, "text": "", "completed": False},
        {"id": 9, "text": 42, "completed": False},
        {"id": 9, "text": "a", "completed": "yes"},
        {"id": 9, "text": "a"},
    ],
)
def test_bad_records_are_dropped_and_the_rest_kept(bad_record) -> None:
    good = [{"id": 1, "text": "keep", "completed": False}, {"id": 2, "text": "also", "completed": True}]
    raw = json.dumps([good[0], bad_record, good[1]])

    assert decode_tasks(raw) == [
        Task(id=1, text="keep", completed=False),
        Task(id=2, text="also", completed=True),
    ]


def test_duplicate_ids_keep_the_first_record() -> None:
    raw = json.dumps(
        [
            {"id": 5, "text": "first", "completed": False},
            {"id": 5, "text": "second", "completed": True},
            {"id": 6, "text": "other", "completed": False},
        ]
    )
    assert decode_tasks(raw) == [
        Task(id=5, text="first", completed=False),
        Task(id=6, text="other", completed=False),
    ]


def test_dropped_records_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING", logger="taskace.tasks.snapshot"):
        decode_tasks('[{"id": 1, "text": "", "completed": false}]')
    assert "empty or invalid text" in caplog.text


def test_malformed_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        decode_tasks("[")
