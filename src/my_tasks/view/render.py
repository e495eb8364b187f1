# src/my_tasks/view/render.py

"""Plain-text rendering of the view model for a terminal."""

from __future__ import annotations

import re
import textwrap

from .binding import Dialog, DialogKind, ViewModel
from .theme import ICON_GLYPHS, Palette

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
# C0/C1 control characters, ESC included.
CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
MIN_WIDTH = 30
MAX_WIDTH = 72


def visible_len(s: str) -> int:
    return len(ANSI_RE.sub("", s))


def printable(text: str) -> str:
    """Stored text with whitespace controls turned into spaces and the rest removed."""
    return CONTROL_RE.sub(lambda m: " " if m.group() in "\t\n\r" else "", text)


def _pad_right(left: str, right: str, width: int) -> str:
    gap = width - visible_len(left) - visible_len(right)
    return left + " " * max(1, gap) + right


def render_lines(view: ViewModel, palette: Palette, *, width: int = MAX_WIDTH) -> list[str]:
    """
    Header (title + theme icon), then one card per task, or the empty message,
    then the "New Task" hint. Row numbers are 1-based.
    """
    width = max(MIN_WIDTH, min(width, MAX_WIDTH))
    c = palette.color
    lines: list[str] = []

    icon = ICON_GLYPHS.get(view.theme_icon, view.theme_icon)
    header = c(view.app_title, palette.bold, palette.title)
    toggle = c(f"[{icon}] /theme", palette.accent)
    lines.append(_pad_right(header, toggle, width))
    lines.append(c("=" * width, palette.dimmed))

    if view.empty_message:
        lines.append("")
        lines.append(c(view.empty_message, palette.dimmed))
    for row in view.rows:
        number = f"{row.index + 1}."
        indent = " " * (len(number) + 1)
        lines.append("")
        title = printable(row.title) or "<untitled>"
        for j, part in enumerate(textwrap.wrap(title, width - len(indent)) or [""]):
            prefix = c(number, palette.bold, palette.accent) + " " if j == 0 else indent
            lines.append(prefix + c(part, palette.bold, palette.title))
        for part in textwrap.wrap(printable(row.summary_text), width - len(indent)):
            lines.append(indent + c(part, palette.dimmed))

    lines.append("")
    button = c(f"[ {view.new_task_label} ]", palette.bold, palette.accent)
    lines.append(button + "  /new   /edit N   /delete N   /help")
    return lines


def render_dialog_header(dialog: Dialog, palette: Palette) -> list[str]:
    c = palette.color
    style = palette.danger if dialog.kind is DialogKind.DELETE else palette.title
    lines = [c(f"-- {dialog.title} --", palette.bold, style)]
    if dialog.message:
        lines.append(dialog.message)
    return lines
