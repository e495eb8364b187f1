# src/my_tasks/connectors/console_connector.py

from __future__ import annotations

import logging
import shutil
import sys

from ..cli.commands import registry as command_registry
from ..core.ports import Prompt
from ..core.state import AppState
from ..view.render import render_lines

logger = logging.getLogger(__name__)

# ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home)
_CLEAR = "\033[3J\033[H\033[2J\033[H"


def _clear_screen() -> None:
    try:
        if sys.stdout.isatty():
            print(_CLEAR, end="", flush=True)
    except Exception:
        pass


def draw(state: AppState, *, clear: bool = False, notice: str | None = None) -> None:
    """Render the current view; the list is always re-read from the store."""
    if clear:
        _clear_screen()
    width = shutil.get_terminal_size((72, 24)).columns
    for line in render_lines(state.view.render_model(), state.palette(), width=width):
        print(line)
    if notice:
        print(f"\n{notice}")


def run_console_loop(state: AppState, prompt: Prompt = input) -> None:
    clear = bool(getattr(state.settings, "clear_screen", False))
    logger.info("Console started (tasks=%d clear=%s).", state.task_store.count(), clear)

    notice: str | None = "Use /help for commands. Use /exit to quit."

    while True:
        draw(state, clear=clear, notice=notice)
        notice = None
        try:
            user_input = prompt("\n> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            # Bare text is shorthand for a new task title.
            user_input = f"/new {user_input}"

        try:
            notice = command_registry.handle(state, user_input, prompt=prompt)
        except (EOFError, KeyboardInterrupt):
            state.view.cancel()
            notice = "Cancelled."
        except Exception:
            logger.exception("Command handler crashed.")
            state.view.cancel()
            notice = "Internal error while handling a command."

    logger.info("Console finished.")
