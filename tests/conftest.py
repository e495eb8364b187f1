# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from my_tasks.cli.bootstrap import create_initial_state
from my_tasks.core.state import AppState

from .fakes import MemoryStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="My Tasks",
        log_level="WARNING",
        # Paths (tmp per test run)
        data_dir=tmp_path,
        storage_path=tmp_path / "local_storage.sqlite3",
        # Persisted store keys
        tasks_key="tasks",
        color_scheme_key="color-scheme",
        # Theme / console
        preferred_color_scheme="light",
        clear_screen=False,
        force_color=False,
        no_color=True,
        truecolor=False,
    )


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def state(settings: SimpleNamespace, storage: MemoryStorage) -> AppState:
    """AppState wired with an in-memory key-value store."""
    return create_initial_state(settings=settings, storage=storage)
