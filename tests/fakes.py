# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable


class MemoryStorage:
    """
    In-memory KeyValueStorage for unit tests.

    - Records every write for assertions
    - Can be switched to fail on reads or writes
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.writes: list[tuple[str, str]] = []
        self.fail_writes = False
        self.fail_reads = False

    def get_item(self, key: str) -> str | None:
        if self.fail_reads:
            raise OSError("database is locked")
        return self.data.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.writes.append((key, value))
        self.data[key] = value

    def remove_item(self, key: str) -> None:
        self.data.pop(key, None)


class ScriptedPrompt:
    """
    input()-compatible prompt that replays canned answers.

    Raises EOFError once the script runs out, like input() on a closed stdin.
    """

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.labels: list[str] = []

    def __call__(self, label: str) -> str:
        self.labels.append(label)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)
