import pytest

from unisym.blocks import Block
from unisym.theme import UnicodeConfig, UnicodeTheme


@pytest.mark.parametrize("block", list(Block))
@pytest.mark.parametrize("theme", list(UnicodeTheme))
def test_single_character(block, theme):
    assert len(Block.get_char(block, theme)) == 1


@pytest.mark.parametrize("block", list(Block))
def test_minimal_is_ascii_and_others_are_not(block):
    assert Block.get_char(block, UnicodeTheme.MINIMAL).isascii()
    assert not Block.get_char(block, UnicodeTheme.BASIC).isascii()


@pytest.mark.parametrize("block", list(Block))
def test_non_minimal_themes_share_glyph(block):
    glyphs = {
        Block.get_char(block, t) for t in UnicodeTheme if t is not UnicodeTheme.MINIMAL
    }
    assert len(glyphs) == 1


def test_pinned_values():
    assert Block.FULL.get_char(UnicodeTheme.MINIMAL) == "#"
    assert Block.FULL.get_char(UnicodeTheme.RICH) == "█"
    assert Block.LIGHT_SHADE.get_char(UnicodeTheme.FANCY) == "░"


def test_half_and_left_half_share_glyph():
    assert Block.HALF.get_char(UnicodeTheme.RICH) == Block.LEFT_HALF.get_char(UnicodeTheme.RICH)


@pytest.mark.parametrize("block", list(Block))
def test_fallback_equals_minimal(block):
    config = UnicodeConfig.with_theme(UnicodeTheme.RICH).with_fallback()
    assert config.get_char(block, None) == block.get_char(UnicodeTheme.MINIMAL)


def test_get_str_for_unicode_block():
    assert Block.DARK_SHADE.get_str(UnicodeTheme.RICH) == "?"
    assert Block.DARK_SHADE.get_str(UnicodeTheme.MINIMAL) == "#"