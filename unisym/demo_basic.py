"""Demonstration of symbols rendered in each theme and of global configuration."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from unisym.arrows import Arrow
from unisym.git import GitStatus
from unisym.symbols import Symbol
from unisym.theme import UnicodeConfig, UnicodeTheme, get_char, set_global_config


def main(argv: Sequence[str] | None = None) -> int:
    """Print symbols in several themes, then under two global configurations."""
    argparse.ArgumentParser(description="Show basic themed symbol usage.").parse_args(argv)

    rich = UnicodeTheme.RICH

    print("Unicode-rs Basic Usage Example")
    print("==============================\n")

    print("Symbol themes:")
    print(f"  Minimal: {Symbol.CHECK.get_char(UnicodeTheme.MINIMAL)}")
    print(f"  Basic:   {Symbol.CHECK.get_char(UnicodeTheme.BASIC)}")
    print(f"  Rich:    {Symbol.CHECK.get_char(UnicodeTheme.RICH)}")
    print(f"  Fancy:   {Symbol.CHECK.get_char(UnicodeTheme.FANCY)}")
    print()

    print("Symbol categories:")

    print("  Symbols:")
    print(f"    Check: {Symbol.CHECK.get_char(rich)}")
    print(f"    X:     {Symbol.X.get_char(rich)}")
    print(f"    !:     {Symbol.EXCLAMATION.get_char(rich)}")
    print(f"    ?:     {Symbol.QUESTION.get_char(rich)}")
    print()

    print("  Arrows:")
    print(f"    Up:    {Arrow.UP.get_char(rich)}")
    print(f"    Down:  {Arrow.DOWN.get_char(rich)}")
    print(f"    Left:  {Arrow.LEFT.get_char(rich)}")
    print(f"    Right: {Arrow.RIGHT.get_char(rich)}")
    print()

    print("  Git Status:")
    print(f"    Modified:  {GitStatus.MODIFIED.get_char(rich)}")
    print(f"    Added:     {GitStatus.ADDED.get_char(rich)}")
    print(f"    Deleted:   {GitStatus.DELETED.get_char(rich)}")
    print(f"    Untracked: {GitStatus.UNTRACKED.get_char(rich)}")
    print()

    print("Global configuration example:")

    set_global_config(UnicodeConfig.with_theme(UnicodeTheme.MINIMAL))
    print("  With Minimal theme:")
    print(f"    Check: {get_char(Symbol.CHECK)}")
    print(f"    Arrow: {get_char(Arrow.RIGHT)}")

    set_global_config(
        UnicodeConfig.with_theme(UnicodeTheme.RICH)
        .with_fallback()
        .with_override("custom_check", "√")
    )
    print("  With Rich theme + fallback:")
    print(f"    Check: {get_char(Symbol.CHECK)}")
    print(f"    Custom: {get_char(Symbol.CHECK, 'custom_check')}")

    print("\nExample complete!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())