# src/my_tasks/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.ports import Prompt
from ..core.state import AppState
from ..view.render import render_dialog_header

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], Prompt | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /new, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw_args: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        *,
        raw_args: bool = False,
    ) -> None:
        """raw_args=True passes the rest of the line as one argument, spacing intact."""
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if raw_args:
            self._raw_args.update(n.lower() for n in [name, *aliases])

    def handle(self, state: AppState, line: str, prompt: Prompt | None = None) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1].strip() if len(parts) > 1 else ""
        if name in self._raw_args:
            args = [rest] if rest else []
        else:
            args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, prompt)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_row(args: list[str]) -> int | None:
    """1-based row number from args -> 0-based index (None if missing/invalid)."""
    if not args:
        return None
    raw = args[0].rstrip(".")
    if not raw.isdigit():
        return None
    return int(raw) - 1


def _say(prompt: Prompt | None, lines: list[str]) -> None:
    # Only interactive sessions see dialog headers.
    if prompt is None:
        return
    for line in lines:
        print(line)


def _confirm(answer: str) -> bool:
    return answer.strip().lower() in ("y", "yes")


def cmd_help(state: AppState, args: list[str]) -> str:
    # /exit is handled by the console loop itself.
    return registry.build_help() + "\n  /exit - Quit (alias /quit)."


def cmd_new(state: AppState, args: list[str], prompt: Prompt | None = None) -> str:
    """
    /new             -> prompts for title and summary
    /new <title...>  -> inline title, empty summary
    """
    view = state.view
    dialog = view.open_create()

    if args:
        view.confirm_create(args[0], "")
        return "Task created."

    if prompt is None:
        view.cancel()
        return "Usage: /new <title>"

    _say(prompt, render_dialog_header(dialog, state.palette()))
    title = ""
    while not title:
        title = prompt("Title (required, '-' to cancel): ").strip()
    if title == "-":
        view.cancel()
        return "Cancelled."
    summary = prompt("Summary: ").strip()

    if not _confirm(prompt(f"{dialog.confirm_label}? [Y/n] ") or "y"):
        view.cancel()
        return "Cancelled."

    view.confirm_create(title, summary)
    return "Task created."


def cmd_edit(state: AppState, args: list[str], prompt: Prompt | None = None) -> str:
    """
    /edit N  -> prompts for title and summary, pre-filled from task N
    """
    index = _parse_row(args)
    if index is None:
        return "Usage: /edit <number>"

    view = state.view
    dialog = view.request_edit(index)
    if dialog is None:
        return f"No task #{index + 1}."

    if prompt is None:
        view.cancel()
        return "Editing needs an interactive console."

    form = view.edit_form()
    if form is None:
        view.cancel()
        return f"No task #{index + 1}."

    _say(prompt, render_dialog_header(dialog, state.palette()))
    title = prompt(f"Title [{form.title}]: ").strip() or form.title
    summary_raw = prompt(f"Summary [{form.summary}] ('-' to clear): ").strip()
    if summary_raw == "-":
        summary = ""
    else:
        summary = summary_raw or form.summary

    if not _confirm(prompt(f"{dialog.confirm_label}? [Y/n] ") or "y"):
        view.cancel()
        return "Cancelled."

    if not view.confirm_edit(title, summary):
        return f"No task #{index + 1}."
    return "Task updated."


def cmd_delete(state: AppState, args: list[str], prompt: Prompt | None = None) -> str:
    """
    /delete N  -> asks for confirmation, then removes task N
    """
    index = _parse_row(args)
    if index is None:
        return "Usage: /delete <number>"

    view = state.view
    dialog = view.request_delete(index)
    if dialog is None:
        return f"No task #{index + 1}."

    if prompt is None:
        view.cancel()
        return "Deleting needs an interactive console."

    _say(prompt, render_dialog_header(dialog, state.palette()))
    if not _confirm(prompt(f"{dialog.confirm_label}? [y/N] ")):
        view.cancel()
        return "Cancelled."

    if not view.confirm_delete():
        return f"No task #{index + 1}."
    return "Task deleted."


def cmd_theme(state: AppState, args: list[str]) -> str:
    """
    /theme        -> toggle light/dark
    /theme dark   -> set explicitly
    """
    if args:
        wanted = args[0].lower()
        if wanted not in ("light", "dark"):
            return "Usage: /theme [light|dark]"
        if wanted != state.theme.scheme.value:
            state.view.toggle_theme()
        return f"Colour scheme: {state.theme.scheme.value}."

    scheme = state.view.toggle_theme()
    return f"Colour scheme: {scheme}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "new", cmd_new, help_text="New Task: /new or /new <title>.", aliases=["n", "add"], raw_args=True
)
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <number>.", aliases=["e"])
registry.register(
    "delete", cmd_delete, help_text="Delete a task: /delete <number>.", aliases=["d", "rm"]
)
registry.register("theme", cmd_theme, help_text="Toggle light/dark: /theme [light|dark].", aliases=["t"])
