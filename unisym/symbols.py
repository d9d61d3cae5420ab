"""General symbols: check marks, crosses, punctuation and legal marks."""

from __future__ import annotations

from enum import Enum, auto

from unisym.theme import UnicodeProvider, UnicodeTheme


class Symbol(UnicodeProvider, Enum):
    """General symbols for common indicators."""

    CHECK = auto()
    X = auto()
    EXCLAMATION = auto()
    QUESTION = auto()
    AT = auto()
    HASH = auto()
    DOLLAR = auto()
    PERCENT = auto()
    AMPERSAND = auto()
    COPYRIGHT = auto()
    TRADEMARK = auto()
    REGISTERED = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this symbol under ``theme``."""
        return _GLYPHS[self][theme]


def _themed(minimal: str, basic: str, rich: str, fancy: str) -> dict[UnicodeTheme, str]:
    return dict(zip(UnicodeTheme, (minimal, basic, rich, fancy)))


def _same(char: str) -> dict[UnicodeTheme, str]:
    return _themed(char, char, char, char)


_GLYPHS: dict[Symbol, dict[UnicodeTheme, str]] = {
    Symbol.CHECK: _themed("v", "✓", "✓", "✅"),
    Symbol.X: _themed("X", "✗", "✖", "❌"),
    Symbol.EXCLAMATION: _themed("!", "!", "❗", "❗"),
    Symbol.QUESTION: _themed("?", "?", "❓", "❓"),
    Symbol.AT: _same("@"),
    Symbol.HASH: _same("#"),
    Symbol.DOLLAR: _same("$"),
    Symbol.PERCENT: _same("%"),
    Symbol.AMPERSAND: _same("&"),
    Symbol.COPYRIGHT: _themed("C", "©", "©", "©"),
    Symbol.TRADEMARK: _themed("T", "™", "™", "™"),
    Symbol.REGISTERED: _themed("R", "®", "®", "®"),
}