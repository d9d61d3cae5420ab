"""Interface elements: borders, controls, separators and indicators."""

from __future__ import annotations

from enum import Enum, auto

from unisym.theme import UnicodeProvider, UnicodeTheme


class Border(UnicodeProvider, Enum):
    """Box-drawing characters for borders and junctions."""

    HORIZONTAL = auto()
    VERTICAL = auto()
    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_RIGHT = auto()
    CROSS = auto()
    TEE_UP = auto()
    TEE_DOWN = auto()
    TEE_LEFT = auto()
    TEE_RIGHT = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this border piece under ``theme``."""
        return _BORDERS[self][theme]


class Control(UnicodeProvider, Enum):
    """Buttons, checkboxes and other interactive controls."""

    CHECKBOX_UNCHECKED = auto()
    CHECKBOX_CHECKED = auto()
    RADIO_UNSELECTED = auto()
    RADIO_SELECTED = auto()
    BUTTON = auto()
    MENU_ITEM = auto()
    DROPDOWN_ARROW = auto()
    EXPAND_COLLAPSED = auto()
    EXPAND_EXPANDED = auto()
    LOADING = auto()
    CLOSE = auto()
    MINIMIZE = auto()
    MAXIMIZE = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this control under ``theme``."""
        return _CONTROLS[self][theme]


class Separator(UnicodeProvider, Enum):
    """Line styles for separating sections."""

    THIN = auto()
    THICK = auto()
    DOTTED = auto()
    DASHED = auto()
    DOUBLE = auto()
    WAVY = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this separator under ``theme``."""
        return _SEPARATORS[self][theme]


class Indicator(UnicodeProvider, Enum):
    """Indicators for outcome, progress and activity."""

    SUCCESS = auto()
    WARNING = auto()
    ERROR = auto()
    INFO = auto()
    QUESTION = auto()
    ATTENTION = auto()
    PROGRESS = auto()
    COMPLETE = auto()
    PENDING = auto()
    ACTIVE = auto()
    INACTIVE = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this indicator under ``theme``."""
        return _INDICATORS[self][theme]


def _themed(minimal: str, basic: str, rich: str, fancy: str) -> dict[UnicodeTheme, str]:
    return dict(zip(UnicodeTheme, (minimal, basic, rich, fancy)))


_BORDERS: dict[Border, dict[UnicodeTheme, str]] = {
    Border.HORIZONTAL: _themed("-", "-", "─", "━"),
    Border.VERTICAL: _themed("|", "|", "│", "┃"),
    Border.TOP_LEFT: _themed("+", "+", "┌", "┏"),
    Border.TOP_RIGHT: _themed("+", "+", "┐", "┓"),
    Border.BOTTOM_LEFT: _themed("+", "+", "└", "┗"),
    Border.BOTTOM_RIGHT: _themed("+", "+", "┘", "┛"),
    Border.CROSS: _themed("+", "+", "┼", "╋"),
    Border.TEE_UP: _themed("+", "+", "┴", "┻"),
    Border.TEE_DOWN: _themed("+", "+", "┬", "┳"),
    Border.TEE_LEFT: _themed("+", "+", "┤", "┫"),
    Border.TEE_RIGHT: _themed("+", "+", "├", "┣"),
}

_CONTROLS: dict[Control, dict[UnicodeTheme, str]] = {
    Control.CHECKBOX_UNCHECKED: _themed("[", "☐", "☐", "🔲"),
    Control.CHECKBOX_CHECKED: _themed("X", "☑", "☑", "✅"),
    Control.RADIO_UNSELECTED: _themed("(", "○", "○", "⚪"),
    Control.RADIO_SELECTED: _themed("*", "●", "●", "🔘"),
    Control.BUTTON: _themed("[", "▢", "▢", "🔳"),
    Control.MENU_ITEM: _themed("-", "•", "▸", "🔸"),
    Control.DROPDOWN_ARROW: _themed("v", "▼", "▼", "🔽"),
    Control.EXPAND_COLLAPSED: _themed(">", "▶", "▶", "▶"),
    Control.EXPAND_EXPANDED: _themed("v", "▼", "▼", "🔽"),
    Control.LOADING: _themed("|", "◐", "◐", "🔄"),
    Control.CLOSE: _themed("X", "✕", "✕", "❌"),
    Control.MINIMIZE: _themed("_", "−", "−", "➖"),
    Control.MAXIMIZE: _themed("^", "□", "□", "⬜"),
}

_SEPARATORS: dict[Separator, dict[UnicodeTheme, str]] = {
    Separator.THIN: _themed("-", "─", "─", "─"),
    Separator.THICK: _themed("=", "━", "━", "━"),
    Separator.DOTTED: _themed(".", "┄", "┄", "┈"),
    Separator.DASHED: _themed("-", "┅", "┅", "┉"),
    Separator.DOUBLE: _themed("=", "═", "═", "═"),
    Separator.WAVY: _themed("~", "〜", "〜", "〰"),
}

_INDICATORS: dict[Indicator, dict[UnicodeTheme, str]] = {
    Indicator.SUCCESS: _themed("+", "✓", "✓", "✅"),
    Indicator.WARNING: _themed("!", "⚠", "⚠", "⚠"),
    Indicator.ERROR: _themed("X", "✗", "✗", "❌"),
    Indicator.INFO: _themed("i", "ℹ", "ℹ", "ℹ"),
    Indicator.QUESTION: _themed("?", "?", "❓", "❓"),
    Indicator.ATTENTION: _themed("*", "●", "●", "🔴"),
    Indicator.PROGRESS: _themed(".", "◐", "◐", "🔄"),
    Indicator.COMPLETE: _themed("*", "●", "●", "🟢"),
    Indicator.PENDING: _themed("o", "○", "○", "⚪"),
    Indicator.ACTIVE: _themed("*", "●", "●", "🟢"),
    Indicator.INACTIVE: _themed("o", "○", "○", "⚪"),
}