# src/my_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app, built once and passed explicitly.
- Nothing reads the environment after startup.

Environment variables:
- MYTASKS_APP_NAME: title shown at the top of the list (default: My Tasks).
- MYTASKS_LOG_LEVEL: screen log level, WARNING or above (default: WARNING).
- MYTASKS_DATA_DIR: local data directory (default: .local/my_tasks).
- MYTASKS_STORAGE_PATH: key-value store file (default: <data_dir>/local_storage.sqlite3).
- MYTASKS_TASKS_KEY: key holding the task list (default: tasks).
- MYTASKS_COLOR_SCHEME_KEY: key holding the chosen scheme (default: color-scheme).
- MYTASKS_COLOR_SCHEME: preferred scheme when none is stored (light/dark).
- MYTASKS_CLEAR_SCREEN: redraw on a cleared screen (default: true).
- FORCE_COLOR / NO_COLOR: the usual terminal colour switches.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "MYTASKS"

DEFAULT_TASKS_KEY = "tasks"
DEFAULT_COLOR_SCHEME_KEY = "color-scheme"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _preferred_scheme() -> str:
    """
    Ambient colour-scheme preference.

    Explicit MYTASKS_COLOR_SCHEME wins; otherwise COLORFGBG (set by many
    terminals as "fg;bg") hints a dark background when bg is 0-6 or 8.
    """
    explicit = _env(_k("COLOR_SCHEME")).strip().lower()
    if explicit in ("light", "dark"):
        return explicit

    fgbg = os.getenv("COLORFGBG", "")
    bg = fgbg.split(";")[-1].strip() if fgbg else ""
    if bg.isdigit() and int(bg) in (0, 1, 2, 3, 4, 5, 6, 8):
        return "dark"
    return "light"


def _truecolor_env() -> bool:
    colorterm = os.getenv("COLORTERM", "").lower()
    return any(tok in colorterm for tok in ("truecolor", "24bit"))


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_path: Path

    # ---- Persisted store keys ----
    tasks_key: str
    color_scheme_key: str

    # ---- Theme / console ----
    preferred_color_scheme: str
    clear_screen: bool
    force_color: bool
    no_color: bool
    truecolor: bool

    @staticmethod
    def from_env() -> "Settings":
        _load_dotenv_if_available()

        app_name = _env(_k("APP_NAME"), "My Tasks").strip() or "My Tasks"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/my_tasks"))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / "local_storage.sqlite3")

        tasks_key = _env(_k("TASKS_KEY"), DEFAULT_TASKS_KEY).strip() or DEFAULT_TASKS_KEY
        color_scheme_key = (
            _env(_k("COLOR_SCHEME_KEY"), DEFAULT_COLOR_SCHEME_KEY).strip()
            or DEFAULT_COLOR_SCHEME_KEY
        )

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_path=storage_path,
            tasks_key=tasks_key,
            color_scheme_key=color_scheme_key,
            preferred_color_scheme=_preferred_scheme(),
            clear_screen=_env_bool(_k("CLEAR_SCREEN"), True),
            force_color=_env_bool("FORCE_COLOR", False),
            no_color=os.getenv("NO_COLOR") is not None,
            truecolor=_truecolor_env(),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
