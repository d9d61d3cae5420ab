"""Block elements for progress bars, charts and shading."""

from __future__ import annotations

from enum import Enum, auto

from unisym.theme import UnicodeProvider, UnicodeTheme


class Block(UnicodeProvider, Enum):
    """Block characters for progress and visual elements."""

    FULL = auto()
    THREE_QUARTERS = auto()
    HALF = auto()
    QUARTER = auto()
    EIGHTH = auto()
    UPPER_HALF = auto()
    LOWER_HALF = auto()
    LEFT_HALF = auto()
    RIGHT_HALF = auto()
    LIGHT_SHADE = auto()
    MEDIUM_SHADE = auto()
    DARK_SHADE = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this block under ``theme``."""
        return _BLOCKS[self][theme]


def _ascii_or_block(minimal: str, glyph: str) -> dict[UnicodeTheme, str]:
    return {theme: minimal if theme is UnicodeTheme.MINIMAL else glyph for theme in UnicodeTheme}


_BLOCKS: dict[Block, dict[UnicodeTheme, str]] = {
    Block.FULL: _ascii_or_block("#", "█"),
    Block.THREE_QUARTERS: _ascii_or_block("#", "▉"),
    Block.HALF: _ascii_or_block("=", "▌"),
    Block.QUARTER: _ascii_or_block("|", "▎"),
    Block.EIGHTH: _ascii_or_block("|", "▏"),
    Block.UPPER_HALF: _ascii_or_block("^", "▀"),
    Block.LOWER_HALF: _ascii_or_block("_", "▄"),
    Block.LEFT_HALF: _ascii_or_block("|", "▌"),
    Block.RIGHT_HALF: _ascii_or_block("|", "▐"),
    Block.LIGHT_SHADE: _ascii_or_block(".", "░"),
    Block.MEDIUM_SHADE: _ascii_or_block(":", "▒"),
    Block.DARK_SHADE: _ascii_or_block("#", "▓"),
}