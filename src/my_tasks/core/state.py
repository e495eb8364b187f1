# src/my_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore
from ..view.binding import ViewBinding
from ..view.theme import Palette, ThemeController
from .ports import KeyValueStorage


@dataclass
class AppState:
    # Settings object (real Settings or a SimpleNamespace in tests).
    settings: Any

    storage: KeyValueStorage
    task_store: TaskStore
    theme: ThemeController
    view: ViewBinding

    # Colour switches resolved once at startup; the palette follows the scheme.
    color_enabled: bool = False
    truecolor: bool = False

    def palette(self) -> Palette:
        return Palette.for_scheme(self.theme.scheme, enabled=self.color_enabled, truecolor=self.truecolor)
