# src/my_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the persisted store swappable and lets tests run without a disk.
"""

from typing import Any, Callable, Protocol

Prompt = Callable[[str], str]
# Reads one line of user input after showing a label (input()-compatible).


class KeyValueStorage(Protocol):
    """
    Synchronous string key-value store (localStorage-style).

    get_item returns None for a missing key; set_item overwrites unconditionally.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class TaskRepo(Protocol):
    """What the view binding needs from the task store."""

    @property
    def tasks(self) -> list[Any]: ...

    def count(self) -> int: ...
    def get(self, index: int) -> Any | None: ...
    def add(self, task: Any) -> bool: ...
    def replace(self, index: int, task: Any) -> bool: ...
    def remove(self, index: int) -> bool: ...
