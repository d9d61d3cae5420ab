from enum import Enum, auto

import pytest

from unisym.symbols import Symbol
from unisym.theme import (
    UnicodeConfig,
    UnicodeProvider,
    UnicodeTheme,
    get_char,
    get_global_config,
    get_str,
    set_global_config,
)


class Blank(UnicodeProvider, Enum):
    SPACE = auto()

    def get_char(self, theme):
        return " "


class Bare(UnicodeProvider, Enum):
    ONLY = auto()


@pytest.fixture(autouse=True)
def restore_global_config():
    saved = get_global_config()
    yield
    set_global_config(saved)


def test_symbol_themes():
    assert Symbol.CHECK.get_char(UnicodeTheme.MINIMAL) == "v"
    assert Symbol.CHECK.get_char(UnicodeTheme.BASIC) == "✓"
    assert Symbol.CHECK.get_char(UnicodeTheme.RICH) == "✓"


def test_global_config():
    set_global_config(UnicodeConfig.with_theme(UnicodeTheme.MINIMAL))
    assert get_global_config().theme == UnicodeTheme.MINIMAL
    assert get_char(Symbol.CHECK) == "v"


def test_config_with_fallback():
    config = UnicodeConfig.with_theme(UnicodeTheme.RICH).with_fallback()
    assert config.use_fallback is True


def test_config_with_override():
    config = UnicodeConfig().with_override("custom_check", "√")
    assert config.overrides.get("custom_check") == "√"


def test_default_config_is_rich_without_fallback():
    config = UnicodeConfig()
    assert config.theme == UnicodeTheme.RICH
    assert config.use_fallback is False
    assert config.overrides == {}


def test_builders_do_not_mutate_original():
    base = UnicodeConfig.with_theme(UnicodeTheme.FANCY)
    base.with_fallback()
    base.with_override("k", "x")
    assert base.use_fallback is False
    assert base.overrides == {}


def test_override_must_be_single_character():
    with pytest.raises(ValueError):
        UnicodeConfig().with_override("k", "ab")
    with pytest.raises(ValueError):
        UnicodeConfig().with_override("k", "")


def test_override_takes_precedence():
    config = UnicodeConfig.with_theme(UnicodeTheme.RICH).with_override("custom_check", "√")
    assert config.get_char(Symbol.CHECK, "custom_check") == "√"


def test_unknown_override_key_uses_provider():
    config = UnicodeConfig.with_theme(UnicodeTheme.RICH).with_override("custom_check", "√")
    assert config.get_char(Symbol.CHECK, "other") == "✓"
    assert config.get_char(Symbol.CHECK) == "✓"


def test_fallback_replaces_non_ascii_with_minimal():
    config = UnicodeConfig.with_theme(UnicodeTheme.RICH).with_fallback()
    assert config.get_char(Symbol.CHECK) == "v"
    assert config.get_char(Symbol.AT) == "@"


def test_without_fallback_keeps_unicode():
    config = UnicodeConfig.with_theme(UnicodeTheme.FANCY)
    assert config.get_char(Symbol.CHECK) == "✅"


def test_global_override_through_get_char():
    set_global_config(
        UnicodeConfig.with_theme(UnicodeTheme.RICH)
        .with_fallback()
        .with_override("custom_check", "√")
    )
    assert get_char(Symbol.CHECK) == "v"
    assert get_char(Symbol.CHECK, "custom_check") == "√"


def test_global_config_is_returned_as_copy():
    set_global_config(UnicodeConfig.with_theme(UnicodeTheme.BASIC))
    copy = get_global_config()
    copy.overrides["k"] = "z"
    copy.theme = UnicodeTheme.FANCY
    fresh = get_global_config()
    assert fresh.theme == UnicodeTheme.BASIC
    assert "k" not in fresh.overrides


def test_provider_get_str_keeps_printable_ascii():
    assert Symbol.CHECK.get_str(UnicodeTheme.MINIMAL) == "v"
    assert Blank.SPACE.get_str(UnicodeTheme.RICH) == " "


def test_provider_get_str_replaces_unicode():
    assert Symbol.CHECK.get_str(UnicodeTheme.RICH) == "?"


def test_global_get_str_only_keeps_space():
    set_global_config(UnicodeConfig.with_theme(UnicodeTheme.MINIMAL))
    assert get_str(Blank.SPACE) == " "
    assert get_str(Symbol.CHECK) == "?"


def test_provider_without_characters_raises():
    with pytest.raises(NotImplementedError):
        UnicodeProvider.get_char(Bare.ONLY, UnicodeTheme.RICH)