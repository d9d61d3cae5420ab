"""Geometric shapes for icons and visual elements."""

from __future__ import annotations

from enum import Enum, auto

from unisym.theme import UnicodeProvider, UnicodeTheme


class Shape(UnicodeProvider, Enum):
    """Basic geometric shapes."""

    CIRCLE = auto()
    SQUARE = auto()
    TRIANGLE = auto()
    DIAMOND = auto()
    STAR = auto()
    HEART = auto()
    PLUS = auto()
    CROSS = auto()
    DOT = auto()
    BULLET = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this shape under ``theme``."""
        return _SHAPES[self][theme]


def _themed(minimal: str, basic: str, rich: str, fancy: str) -> dict[UnicodeTheme, str]:
    return dict(zip(UnicodeTheme, (minimal, basic, rich, fancy)))


_SHAPES: dict[Shape, dict[UnicodeTheme, str]] = {
    Shape.CIRCLE: _themed("o", "○", "●", "🔴"),
    Shape.SQUARE: _themed("#", "□", "■", "🟦"),
    Shape.TRIANGLE: _themed("^", "△", "▲", "🔺"),
    Shape.DIAMOND: _themed("<", "◇", "◆", "💎"),
    Shape.STAR: _themed("*", "☆", "★", "⭐"),
    Shape.HEART: _themed("<", "♡", "♥", "❤"),
    Shape.PLUS: _themed("+", "+", "✚", "➕"),
    Shape.CROSS: _themed("x", "✕", "✖", "❌"),
    Shape.DOT: _themed(".", "•", "●", "🔴"),
    Shape.BULLET: _themed("*", "•", "●", "🔸"),
}