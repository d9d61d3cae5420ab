"""Directional arrows and navigation symbols."""

from __future__ import annotations

from enum import Enum, auto

from unisym.theme import UnicodeProvider, UnicodeTheme


class Arrow(UnicodeProvider, Enum):
    """Arrows for direction, flow and indicators."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    UP_LEFT = auto()
    UP_RIGHT = auto()
    DOWN_LEFT = auto()
    DOWN_RIGHT = auto()
    DOUBLE_UP = auto()
    DOUBLE_DOWN = auto()
    DOUBLE_LEFT = auto()
    DOUBLE_RIGHT = auto()
    CURVED_LEFT = auto()
    CURVED_RIGHT = auto()
    RETURN = auto()
    REFRESH = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this arrow under ``theme``."""
        return _ARROWS[self][theme]


class Navigation(UnicodeProvider, Enum):
    """Navigation controls such as first, next and page up."""

    FIRST = auto()
    PREVIOUS = auto()
    NEXT = auto()
    LAST = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    BACK = auto()
    FORWARD = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this navigation item under ``theme``."""
        return _NAVIGATION[self][theme]


def _themed(minimal: str, basic: str, rich: str, fancy: str) -> dict[UnicodeTheme, str]:
    return dict(zip(UnicodeTheme, (minimal, basic, rich, fancy)))


_ARROWS: dict[Arrow, dict[UnicodeTheme, str]] = {
    Arrow.UP: _themed("^", "↑", "↑", "⬆"),
    Arrow.DOWN: _themed("v", "↓", "↓", "⬇"),
    Arrow.LEFT: _themed("<", "←", "←", "⬅"),
    Arrow.RIGHT: _themed(">", "→", "→", "➡"),
    Arrow.UP_LEFT: _themed("\\", "↖", "↖", "↖"),
    Arrow.UP_RIGHT: _themed("/", "↗", "↗", "↗"),
    Arrow.DOWN_LEFT: _themed("/", "↙", "↙", "↙"),
    Arrow.DOWN_RIGHT: _themed("\\", "↘", "↘", "↘"),
    Arrow.DOUBLE_UP: _themed("^", "⇑", "⇑", "⏫"),
    Arrow.DOUBLE_DOWN: _themed("v", "⇓", "⇓", "⏬"),
    Arrow.DOUBLE_LEFT: _themed("<", "⇐", "⇐", "⏪"),
    Arrow.DOUBLE_RIGHT: _themed(">", "⇒", "⇒", "⏩"),
    Arrow.CURVED_LEFT: _themed("<", "↰", "↰", "↰"),
    Arrow.CURVED_RIGHT: _themed(">", "↱", "↱", "↱"),
    Arrow.RETURN: _themed("\\", "↵", "↵", "⏎"),
    Arrow.REFRESH: _themed("R", "↻", "↻", "🔄"),
}

_NAVIGATION: dict[Navigation, dict[UnicodeTheme, str]] = {
    Navigation.FIRST: _themed("<", "⇤", "⇤", "⏮"),
    Navigation.PREVIOUS: _themed("<", "◀", "◀", "⏪"),
    Navigation.NEXT: _themed(">", "▶", "▶", "⏩"),
    Navigation.LAST: _themed(">", "⇥", "⇥", "⏭"),
    Navigation.HOME: _themed("H", "⌂", "⌂", "🏠"),
    Navigation.END: _themed("E", "⌐", "⌐", "🔚"),
    Navigation.PAGE_UP: _themed("^", "⇞", "⇞", "📄"),
    Navigation.PAGE_DOWN: _themed("v", "⇟", "⇟", "📄"),
    Navigation.BACK: _themed("<", "⬅", "⬅", "🔙"),
    Navigation.FORWARD: _themed(">", "➡", "➡", "🔜"),
}