# tests/test_task_store.py

from __future__ import annotations

import json
import logging

import pytest

from my_tasks.cli.bootstrap import create_initial_state
from my_tasks.tasks.task_models import NO_SUMMARY_TEXT, Task
from my_tasks.tasks.task_store import (
    TaskDecodeError,
    TaskStore,
    create,
    decode_tasks,
    delete_at,
    encode_tasks,
    update_at,
)

from .fakes import MemoryStorage

A = Task("A", "a")
B = Task("B", "")
C = Task("C", "c")


def test_create_appends_and_keeps_prefix() -> None:
    tasks = [A, B]
    t = Task("new", "summary")
    out = create(tasks, t)
    assert len(out) == 3
    assert out[-1] == t
    assert out[:2] == [A, B]
    assert tasks == [A, B]


def test_create_accepts_empty_title() -> None:
    out = create([], Task(""))
    assert out == [Task("", "")]


def test_delete_shifts_indices() -> None:
    first = delete_at([A, B, C], 0)
    assert first == [B, C]
    assert delete_at(first, 0) == [C]


def test_delete_out_of_range_is_noop() -> None:
    assert delete_at([A, B], 5) == [A, B]
    assert delete_at([A, B], -1) == [A, B]


def test_update_replaces_whole_record() -> None:
    out = update_at([Task("X", "s")], 0, Task("Y", ""))
    assert out == [Task("Y", "")]


def test_update_out_of_range_is_noop() -> None:
    assert update_at([A], 3, B) == [A]
    assert update_at([A], -1, B) == [A]


def test_identical_tasks_are_told_apart_by_position() -> None:
    same = Task("dup", "x")
    out = delete_at([same, same, C], 1)
    assert out == [same, C]


def test_encode_format() -> None:
    raw = encode_tasks([A, B])
    assert json.loads(raw) == [{"title": "A", "summary": "a"}, {"title": "B", "summary": ""}]


def test_decode_tolerates_missing_fields_and_skips_non_objects() -> None:
    raw = json.dumps([{"title": "only title"}, 42, {"summary": None, "title": "T"}])
    assert decode_tasks(raw) == [Task("only title", ""), Task("T", "")]


@pytest.mark.parametrize("raw", ["{not json", '{"title": "x"}', "null"])
def test_decode_rejects_malformed(raw: str) -> None:
    with pytest.raises(TaskDecodeError):
        decode_tasks(raw)


def test_summary_placeholder() -> None:
    assert Task("t").summary_text == NO_SUMMARY_TEXT
    assert Task("t", "s").summary_text == "s"


def test_load_absent_key_is_empty() -> None:
    store = TaskStore(MemoryStorage())
    assert store.load() == []
    assert store.count() == 0


def test_load_malformed_fails_soft(caplog: pytest.LogCaptureFixture) -> None:
    storage = MemoryStorage({"tasks": "[{broken"})
    store = TaskStore(storage)
    with caplog.at_level(logging.WARNING, logger="my_tasks"):
        assert store.load() == []
    assert any("malformed" in r.getMessage() for r in caplog.records)
    # Left untouched until the next save.
    assert storage.data["tasks"] == "[{broken"


def test_deeply_nested_payload_is_malformed() -> None:
    with pytest.raises(TaskDecodeError):
        decode_tasks("[" * 100000 + "]" * 100000)


def test_deeply_nested_payload_does_not_block_startup(settings) -> None:
    storage = MemoryStorage({"tasks": "[" * 100000 + "]" * 100000})
    assert TaskStore(storage).load() == []

    state = create_initial_state(settings=settings, storage=storage)
    assert state.task_store.tasks == []
    assert state.view.render_model().empty_message == "You have no tasks"


def test_unreadable_store_loads_empty(caplog: pytest.LogCaptureFixture) -> None:
    storage = MemoryStorage({"tasks": encode_tasks([A])})
    storage.fail_reads = True
    store = TaskStore(storage)
    with caplog.at_level(logging.ERROR, logger="my_tasks"):
        assert store.load() == []
    assert store.count() == 0
    assert any("Failed to read" in r.getMessage() for r in caplog.records)


def test_round_trip_through_fresh_store() -> None:
    storage = MemoryStorage()
    tasks = [A, B, C, Task("ünïcode", "ok")]
    TaskStore(storage).save(tasks)
    assert TaskStore(storage).load() == tasks


def test_save_load_is_idempotent() -> None:
    storage = MemoryStorage()
    store = TaskStore(storage)
    store.save([A, B])
    first = storage.data["tasks"]
    for _ in range(3):
        store.save(store.load())
    assert storage.data["tasks"] == first


def test_every_mutation_persists_whole_list() -> None:
    storage = MemoryStorage()
    store = TaskStore(storage, key="my-key")
    store.load()

    assert store.add(A)
    assert store.add(B)
    assert store.replace(1, C)
    assert store.remove(0)

    assert [k for k, _ in storage.writes] == ["my-key"] * 4
    assert decode_tasks(storage.data["my-key"]) == [C]
    assert store.tasks == [C]


def test_out_of_range_mutations_do_not_write() -> None:
    storage = MemoryStorage()
    store = TaskStore(storage)
    store.add(A)
    storage.writes.clear()

    assert store.replace(5, B) is False
    assert store.remove(-1) is False
    assert storage.writes == []
    assert store.tasks == [A]


def test_failed_write_keeps_memory(caplog: pytest.LogCaptureFixture) -> None:
    storage = MemoryStorage()
    store = TaskStore(storage)
    storage.fail_writes = True
    with caplog.at_level(logging.ERROR, logger="my_tasks"):
        assert store.add(A)
    assert store.tasks == [A]
    assert "tasks" not in storage.data
    assert any("Failed to persist" in r.getMessage() for r in caplog.records)


def test_tasks_property_is_a_copy() -> None:
    store = TaskStore(MemoryStorage())
    store.add(A)
    snapshot = store.tasks
    snapshot.append(B)
    assert store.tasks == [A]
