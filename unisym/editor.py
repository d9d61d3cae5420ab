"""Editor cursors and selection markers."""

from __future__ import annotations

from enum import Enum, auto

from unisym.theme import UnicodeProvider, UnicodeTheme


class Cursor(UnicodeProvider, Enum):
    """Editor cursor styles."""

    TEXT = auto()
    BLOCK = auto()
    UNDERLINE = auto()
    VERTICAL_BAR = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this cursor under ``theme``."""
        return _CURSORS[self][theme]


class Selection(UnicodeProvider, Enum):
    """Editor selection indicators."""

    PRIMARY = auto()
    SECONDARY = auto()
    START = auto()
    END = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this selection marker under ``theme``."""
        return _SELECTIONS[self][theme]


def _themed(minimal: str, basic: str, rich: str, fancy: str) -> dict[UnicodeTheme, str]:
    return dict(zip(UnicodeTheme, (minimal, basic, rich, fancy)))


_CURSORS: dict[Cursor, dict[UnicodeTheme, str]] = {
    Cursor.TEXT: _themed("|", "│", "│", "┃"),
    Cursor.BLOCK: _themed("#", "█", "█", "█"),
    Cursor.UNDERLINE: _themed("_", "▁", "▁", "▁"),
    Cursor.VERTICAL_BAR: _themed("|", "▎", "▎", "▎"),
}

_SELECTIONS: dict[Selection, dict[UnicodeTheme, str]] = {
    Selection.PRIMARY: _themed("*", "●", "●", "🔴"),
    Selection.SECONDARY: _themed("o", "○", "○", "⚪"),
    Selection.START: _themed("[", "⟨", "⟨", "⟨"),
    Selection.END: _themed("]", "⟩", "⟩", "⟩"),
}