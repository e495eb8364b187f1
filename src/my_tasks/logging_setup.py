# src/my_tasks/logging_setup.py

"""
Logging for a redraw-the-screen console app.

The task list is repainted after every command, so anything written to
stderr lands in the middle of it. The screen therefore only gets problems
(WARNING+ from my_tasks, ERROR+ from everyone else); the log file under the
data directory gets the full DEBUG trail.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "my_tasks.log"
_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ScreenFilter(logging.Filter):
    """Let own records through at the handler level; foreign ones only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "my_tasks" or record.name.startswith("my_tasks."):
            return True
        # py.warnings (captured warnings.warn) falls in here too.
        return record.levelno >= logging.ERROR


def _screen_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(max(level, logging.WARNING))
    handler.setFormatter(formatter)
    handler.addFilter(_ScreenFilter())
    return handler


def _file_handler(path: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.FileHandler(str(path), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/my_tasks",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Install the screen and file handlers on the root logger.

    console_level below WARNING is raised to WARNING: INFO/DEBUG would
    scroll the list off the screen, and they are in the file anyway.
    Call once, before the first log record. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Re-running replaces handlers instead of stacking duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)
    root.addHandler(_screen_handler(console_level, formatter))
    root.addHandler(_file_handler(log_file, file_level, formatter))

    logging.captureWarnings(True)
    return log_file
