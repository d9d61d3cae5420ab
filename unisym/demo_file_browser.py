"""Demonstration of a file browser listing drawn with file type icons."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import PurePosixPath

from unisym.file_types import (
    FileType,
    LanguageType,
    get_file_type_from_extension,
    get_file_type_from_filename,
)
from unisym.theme import UnicodeConfig, UnicodeProvider, UnicodeTheme, get_char, set_global_config


def _extension(name: str) -> str | None:
    base = PurePosixPath(name).name
    if base == "..":
        return None
    dot = base.rfind(".")
    if dot <= 0:
        return None
    return base[dot + 1 :]


@dataclass(frozen=True)
class FileEntry:
    """A directory entry with its extension, if it has one."""

    name: str
    is_directory: bool
    extension: str | None = None

    @classmethod
    def from_name(cls, name: str, is_directory: bool) -> FileEntry:
        """Build an entry, taking the extension from ``name`` unless it is a directory."""
        return cls(name, is_directory, None if is_directory else _extension(name))

    def kind(self) -> FileType | LanguageType:
        """Return the type used to pick this entry's icon."""
        if self.is_directory:
            return FileType.DIRECTORY
        if self.extension is not None:
            return get_file_type_from_extension(self.extension)
        return get_file_type_from_filename(self.name)


SAMPLE_FILES: tuple[FileEntry, ...] = tuple(
    FileEntry.from_name(name, is_dir)
    for name, is_dir in (
        ("src", True),
        ("target", True),
        ("examples", True),
        ("main.rs", False),
        ("lib.rs", False),
        ("Cargo.toml", False),
        ("README.md", False),
        ("package.json", False),
        ("index.html", False),
        ("style.css", False),
        ("script.js", False),
        ("image.png", False),
        ("document.pdf", False),
        ("archive.zip", False),
        ("config.yaml", False),
        ("data.json", False),
        ("test.py", False),
        ("app.go", False),
        ("component.tsx", False),
        ("unknown_file", False),
    )
)

_THEMES: tuple[tuple[str, UnicodeTheme], ...] = (
    ("Minimal (ASCII)", UnicodeTheme.MINIMAL),
    ("Rich Unicode", UnicodeTheme.RICH),
)

_LANGUAGES: tuple[tuple[str, LanguageType], ...] = (
    ("Rust", LanguageType.RUST),
    ("JavaScript/TypeScript", LanguageType.JAVASCRIPT),
    ("Python", LanguageType.PYTHON),
    ("Go", LanguageType.GO),
    ("HTML", LanguageType.HTML),
    ("CSS", LanguageType.CSS),
    ("JSON", LanguageType.JSON),
    ("YAML", LanguageType.YAML),
    ("Markdown", LanguageType.MARKDOWN),
    ("Shell", LanguageType.SHELL),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Print sample file listings with type icons in several themes."""
    argparse.ArgumentParser(description="Show a sample file browser display.").parse_args(argv)

    print("File Browser Example")
    print("===================\n")

    for theme_name, theme in _THEMES:
        print(f"{theme_name} theme:")
        print("─" * (len(theme_name) + 7) + ":")
        for entry in SAMPLE_FILES:
            kind = entry.kind()
            print(f"  {kind.get_char(theme)} {entry.name} ({kind.value})")
        print()

    print("Language-specific file types:")
    print("============================")
    for name, language in _LANGUAGES:
        print(f"  {language.get_char(UnicodeTheme.RICH)} {name}")
    print()

    print("Realistic File Browser Display:")
    print("==============================")

    set_global_config(UnicodeConfig.with_theme(UnicodeTheme.RICH))

    def icon(provider: UnicodeProvider) -> str:
        return get_char(provider)

    print("📁 /home/user/project")
    print(f"├── {icon(FileType.DIRECTORY)} src/")
    print(f"│   ├── {icon(LanguageType.RUST)} main.rs")
    print(f"│   ├── {icon(LanguageType.RUST)} lib.rs")
    print(f"│   └── {icon(LanguageType.RUST)} mod.rs")
    print(f"├── {icon(FileType.DIRECTORY)} examples/")
    print(f"│   └── {icon(LanguageType.RUST)} basic.rs")
    print(f"├── {icon(FileType.DIRECTORY)} target/")
    print(f"├── {icon(FileType.CONFIG)} Cargo.toml")
    print(f"├── {icon(LanguageType.MARKDOWN)} README.md")
    print(f"├── {icon(LanguageType.JSON)} package.json")
    print(f"└── {icon(FileType.CONFIG)} .gitignore")

    directories = sum(1 for entry in SAMPLE_FILES if entry.is_directory)
    files = len(SAMPLE_FILES) - directories
    print(f"\nFile count: {directories} directories, {files} files")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())