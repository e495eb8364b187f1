# src/my_tasks/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from ..core.ports import KeyValueStorage
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskDecodeError(ValueError):
    """The persisted task list is not a JSON array."""


# ---- pure list operations ----
#
# Each returns a new list and leaves its input untouched.
# Out-of-range (or negative) indices are a no-op for both update and delete.


def create(tasks: Sequence[Task], new_task: Task) -> list[Task]:
    return [*tasks, new_task]


def update_at(tasks: Sequence[Task], index: int, updated_task: Task) -> list[Task]:
    """Replace the element at index wholesale; fields are not merged."""
    return [updated_task if i == index else t for i, t in enumerate(tasks)]


def delete_at(tasks: Sequence[Task], index: int) -> list[Task]:
    """Drop the element at index; later elements shift down by one."""
    return [t for i, t in enumerate(tasks) if i != index]


def in_range(tasks: Sequence[Task], index: int) -> bool:
    return 0 <= index < len(tasks)


# ---- codec ----


def encode_tasks(tasks: Sequence[Task]) -> str:
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


def decode_tasks(raw: str) -> list[Task]:
    """
    Parse a persisted task list.

    Raises TaskDecodeError for malformed JSON or a non-array payload.
    Array entries that are not objects are skipped.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        # Deeply nested arrays are valid JSON but exhaust the decoder.
        raise TaskDecodeError(f"task list is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise TaskDecodeError(f"task list must be a JSON array, got {type(data).__name__}")

    out: list[Task] = []
    for pos, item in enumerate(data):
        if not isinstance(item, dict):
            logger.warning("Skipping stored task #%d: expected object, got %s", pos, type(item).__name__)
            continue
        out.append(Task.from_dict(item))
    return out


class TaskStore:
    """
    In-memory ordered task list bridged to a key-value store.

    Persistence is a whole-list snapshot under one fixed key:
    every mutation re-encodes and overwrites it.
    Single writer (the console loop); no locking.
    """

    def __init__(self, storage: KeyValueStorage, *, key: str = "tasks") -> None:
        self._storage = storage
        self._key = key
        self._tasks: list[Task] = []

    @property
    def key(self) -> str:
        return self._key

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    # ---- persistence bridge ----

    def load(self) -> list[Task]:
        """
        Hydrate from the store.

        Missing key -> empty list. Malformed payload -> empty list + warning;
        the stored value is left as is until the next save overwrites it.
        An unreadable store is logged and also yields an empty list.
        """
        try:
            raw = self._storage.get_item(self._key)
        except Exception:
            logger.exception("Failed to read task list under key=%s", self._key)
            self._tasks = []
            return []

        if raw is None:
            self._tasks = []
            logger.debug("No stored tasks under key=%s", self._key)
            return []

        try:
            tasks = decode_tasks(raw)
        except TaskDecodeError as e:
            logger.warning("Ignoring malformed task list under key=%s: %s", self._key, e)
            tasks = []

        self._tasks = tasks
        logger.info("Loaded %d task(s) from key=%s", len(tasks), self._key)
        return list(tasks)

    def save(self, tasks: Sequence[Task]) -> None:
        """Overwrite the stored list. A failed write is logged; memory stays authoritative."""
        self._tasks = list(tasks)
        try:
            self._storage.set_item(self._key, encode_tasks(self._tasks))
        except Exception:
            logger.exception("Failed to persist %d task(s) under key=%s", len(self._tasks), self._key)

    # ---- stateful helpers (apply + save) ----

    def count(self) -> int:
        return len(self._tasks)

    def get(self, index: int) -> Task | None:
        if not in_range(self._tasks, index):
            return None
        return self._tasks[index]

    def add(self, task: Task) -> bool:
        self.save(create(self._tasks, task))
        logger.debug("Task added index=%d title=%r", len(self._tasks) - 1, task.title)
        return True

    def replace(self, index: int, task: Task) -> bool:
        if not in_range(self._tasks, index):
            logger.debug("Update ignored: index=%d out of range (len=%d)", index, len(self._tasks))
            return False
        self.save(update_at(self._tasks, index, task))
        logger.debug("Task updated index=%d", index)
        return True

    def remove(self, index: int) -> bool:
        if not in_range(self._tasks, index):
            logger.debug("Delete ignored: index=%d out of range (len=%d)", index, len(self._tasks))
            return False
        self.save(delete_at(self._tasks, index))
        logger.debug("Task deleted index=%d", index)
        return True
