# src/my_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the key-value store into the task store and theme,
- hydrates the task list once.
"""

from __future__ import annotations

import logging
import sys

from ..config import get_settings
from ..core.ports import KeyValueStorage
from ..core.state import AppState
from ..storage.local_storage import LocalStorage
from ..tasks.task_store import TaskStore
from ..view.binding import ViewBinding
from ..view.theme import ThemeController, color_enabled

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, storage: KeyValueStorage | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and storage injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to
    get_settings(); if storage is None, opens LocalStorage at settings.storage_path.
    """
    if settings is None:
        settings = get_settings()

    if storage is None:
        _ensure_local_dirs(settings)
        storage = LocalStorage(settings.storage_path)

    task_store = TaskStore(storage, key=settings.tasks_key)
    task_store.load()

    theme = ThemeController(
        storage,
        key=settings.color_scheme_key,
        preferred=settings.preferred_color_scheme,
    )

    view = ViewBinding(task_store, theme, app_title=settings.app_name)

    try:
        isatty = sys.stdout.isatty()
    except Exception:
        isatty = False

    state = AppState(
        settings=settings,
        storage=storage,
        task_store=task_store,
        theme=theme,
        view=view,
        color_enabled=color_enabled(
            isatty=isatty,
            force_color=bool(getattr(settings, "force_color", False)),
            no_color=bool(getattr(settings, "no_color", False)),
        ),
        truecolor=bool(getattr(settings, "truecolor", False)),
    )
    logger.info(
        "State ready: %d task(s), scheme=%s, color=%s",
        task_store.count(),
        theme.scheme.value,
        state.color_enabled,
    )
    return state
