# src/my_tasks/view/theme.py

"""Colour scheme and terminal styles.

Decisions:
- The chosen scheme lives in the key-value store under its own key,
  independent of the task list.
- Without a stored choice the ambient preference from Settings is used.
- Truecolor preferred; falls back to the 256-color cube if unsupported.
- Styling is resolved once at startup into a Palette (no module-level env reads).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from ..core.ports import KeyValueStorage

logger = logging.getLogger(__name__)


class ColorScheme(StrEnum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, raw: str | None, default: ColorScheme) -> ColorScheme:
        if not raw:
            return default
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return default

    def flipped(self) -> ColorScheme:
        return ColorScheme.LIGHT if self is ColorScheme.DARK else ColorScheme.DARK


# Icon on the toggle button: shows what you switch to.
ICON_SUN = "sun"
ICON_MOON_STARS = "moon-stars"

ICON_GLYPHS = {
    ICON_SUN: "☀",
    ICON_MOON_STARS: "☾",
}


class ThemeController:
    """Reads, toggles and persists the colour scheme."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = "color-scheme",
        preferred: ColorScheme | str = ColorScheme.LIGHT,
    ) -> None:
        self._storage = storage
        self._key = key
        self._preferred = ColorScheme.parse(str(preferred), ColorScheme.LIGHT)

    @property
    def scheme(self) -> ColorScheme:
        try:
            raw = self._storage.get_item(self._key)
        except Exception:
            logger.exception("Failed to read colour scheme under key=%s", self._key)
            return self._preferred
        return ColorScheme.parse(raw, self._preferred)

    @property
    def icon(self) -> str:
        return ICON_SUN if self.scheme is ColorScheme.DARK else ICON_MOON_STARS

    def set_scheme(self, scheme: ColorScheme) -> bool:
        try:
            self._storage.set_item(self._key, scheme.value)
        except Exception:
            logger.exception("Failed to persist colour scheme under key=%s", self._key)
            return False
        return True

    def toggle(self) -> ColorScheme:
        """Flip and persist; returns the scheme actually in effect afterwards."""
        if self.set_scheme(self.scheme.flipped()):
            logger.debug("Colour scheme toggled to %s", self.scheme.value)
        return self.scheme


# ---- ANSI helpers ----


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""

    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))

    idx = 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)
    return f"\033[38;5;{idx}m"


# (title, accent, dimmed, danger) per scheme
_SCHEME_HEX: dict[ColorScheme, tuple[str, str, str, str]] = {
    ColorScheme.LIGHT: ("#1A1B1E", "#1C7ED6", "#868E96", "#E03131"),
    ColorScheme.DARK: ("#C1C2C5", "#4DABF7", "#909296", "#FF8787"),
}


@dataclass(frozen=True, slots=True)
class Palette:
    """Escape sequences for one scheme. Empty strings when colour is disabled."""

    enabled: bool
    reset: str
    bold: str
    title: str
    accent: str
    dimmed: str
    danger: str

    @classmethod
    def for_scheme(cls, scheme: ColorScheme, *, enabled: bool, truecolor: bool = False) -> Palette:
        if not enabled:
            return cls(enabled=False, reset="", bold="", title="", accent="", dimmed="", danger="")

        fg = _fg_truecolor if truecolor else _fg_256
        title, accent, dimmed, danger = (fg(*_hex_to_rgb(h)) for h in _SCHEME_HEX[scheme])
        return cls(
            enabled=True,
            reset="\033[0m",
            bold="\033[1m",
            title=title,
            accent=accent,
            dimmed=dimmed,
            danger=danger,
        )

    def color(self, text: str, *styles: str) -> str:
        if not self.enabled:
            return text
        return "".join(styles) + text + self.reset


def color_enabled(*, isatty: bool, force_color: bool, no_color: bool) -> bool:
    """NO_COLOR always wins; otherwise colour on a TTY or when forced."""
    return (force_color or isatty) and not no_color
