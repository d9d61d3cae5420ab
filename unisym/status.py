"""Status indicators for connection, progress and outcome."""

from __future__ import annotations

from enum import Enum, auto

from unisym.theme import UnicodeProvider, UnicodeTheme


class Status(UnicodeProvider, Enum):
    """Status indicators."""

    ONLINE = auto()
    OFFLINE = auto()
    BUSY = auto()
    IDLE = auto()
    ERROR = auto()
    WARNING = auto()
    SUCCESS = auto()
    UNKNOWN = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this status under ``theme``."""
        return _STATUSES[self][theme]


def _themed(minimal: str, basic: str, rich: str, fancy: str) -> dict[UnicodeTheme, str]:
    return dict(zip(UnicodeTheme, (minimal, basic, rich, fancy)))


_STATUSES: dict[Status, dict[UnicodeTheme, str]] = {
    Status.ONLINE: _themed("+", "●", "●", "🟢"),
    Status.OFFLINE: _themed("-", "○", "○", "⚪"),
    Status.BUSY: _themed("*", "◐", "◐", "🔄"),
    Status.IDLE: _themed("o", "◯", "◯", "💤"),
    Status.ERROR: _themed("X", "✗", "✗", "❌"),
    Status.WARNING: _themed("!", "⚠", "⚠", "⚠"),
    Status.SUCCESS: _themed("+", "✓", "✓", "✅"),
    Status.UNKNOWN: _themed("?", "?", "❓", "❓"),
}