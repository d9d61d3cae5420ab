"""Themes, the provider interface and process-wide character configuration."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from enum import Enum


class UnicodeTheme(Enum):
    """How rich the characters drawn for a symbol should be."""

    MINIMAL = "minimal"
    BASIC = "basic"
    RICH = "rich"
    FANCY = "fancy"


_PRINTABLE_ASCII = range(0x20, 0x7F)


class UnicodeProvider:
    """Mixin for symbol sets whose character depends on the theme."""

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the single character drawn for this item under ``theme``."""
        raise NotImplementedError(f"{type(self).__name__} defines no characters")

    def get_str(self, theme: UnicodeTheme) -> str:
        """Return the character as a string, or ``"?"`` if it is not printable ASCII."""
        char = self.get_char(theme)
        return char if ord(char) in _PRINTABLE_ASCII else "?"


@dataclass
class UnicodeConfig:
    """Theme selection, ASCII fallback and per-key character overrides."""

    theme: UnicodeTheme = UnicodeTheme.RICH
    use_fallback: bool = False
    overrides: dict[str, str] = field(default_factory=dict)

    @classmethod
    def with_theme(cls, theme: UnicodeTheme) -> UnicodeConfig:
        """Create a config using ``theme`` and default settings otherwise."""
        return cls(theme=theme)

    def with_fallback(self) -> UnicodeConfig:
        """Return a copy that falls back to the minimal theme for non-ASCII characters."""
        return replace(self, use_fallback=True, overrides=dict(self.overrides))

    def with_override(self, key: str, character: str) -> UnicodeConfig:
        """Return a copy in which ``key`` always yields ``character``."""
        if len(character) != 1:
            raise ValueError(f"override must be a single character, got {character!r}")
        return replace(self, overrides={**self.overrides, key: character})

    def get_char(self, provider: UnicodeProvider, key: str | None = None) -> str:
        """Resolve the character for ``provider``, honouring overrides and fallback."""
        if key is not None and key in self.overrides:
            return self.overrides[key]
        char = provider.get_char(self.theme)
        if self.use_fallback and not char.isascii():
            return provider.get_char(UnicodeTheme.MINIMAL)
        return char

    def _copy(self) -> UnicodeConfig:
        return replace(self, overrides=dict(self.overrides))


_lock = threading.Lock()
_global_config = UnicodeConfig()


def set_global_config(config: UnicodeConfig) -> None:
    """Replace the process-wide configuration."""
    global _global_config
    with _lock:
        _global_config = config._copy()


def get_global_config() -> UnicodeConfig:
    """Return a copy of the process-wide configuration."""
    with _lock:
        return _global_config._copy()


def get_char(provider: UnicodeProvider, key: str | None = None) -> str:
    """Resolve a character using the process-wide configuration."""
    return get_global_config().get_char(provider, key)


def get_str(provider: UnicodeProvider, key: str | None = None) -> str:
    """Resolve a string using the process-wide configuration.

    Only a space is kept; every other character comes back as ``"?"``.
    """
    return " " if get_char(provider, key) == " " else "?"