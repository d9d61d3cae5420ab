"""Demonstration of a git status display drawn with themed symbols."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from unisym.git import GitBranch, GitDiff, GitStatus
from unisym.theme import UnicodeConfig, UnicodeTheme, get_char, set_global_config


@dataclass(frozen=True)
class FileStatus:
    """A path in the working tree and its git status."""

    path: str
    status: GitStatus


SAMPLE_FILES: tuple[FileStatus, ...] = (
    FileStatus("src/main.rs", GitStatus.MODIFIED),
    FileStatus("README.md", GitStatus.ADDED),
    FileStatus("old_file.txt", GitStatus.DELETED),
    FileStatus("new_feature.rs", GitStatus.UNTRACKED),
    FileStatus("Cargo.toml", GitStatus.MODIFIED),
)

_THEMES: tuple[tuple[str, UnicodeTheme], ...] = (
    ("Minimal (ASCII)", UnicodeTheme.MINIMAL),
    ("Basic Unicode", UnicodeTheme.BASIC),
    ("Rich Unicode", UnicodeTheme.RICH),
    ("Fancy Unicode", UnicodeTheme.FANCY),
)


def _display_name(status: GitStatus) -> str:
    return "".join(part.capitalize() for part in status.name.split("_"))


def main(argv: Sequence[str] | None = None) -> int:
    """Print sample git status listings in every theme."""
    argparse.ArgumentParser(description="Show a sample git status display.").parse_args(argv)

    print("Git Status Display Example")
    print("==========================\n")

    for theme_name, theme in _THEMES:
        print(f"{theme_name} theme:")
        print("─" * (len(theme_name) + 7) + ":")
        for file in SAMPLE_FILES:
            print(f"  {file.status.get_char(theme)} {file.path} ({_display_name(file.status)})")
        print()

    print("Branch and Diff Symbols:")
    print("========================")

    theme = UnicodeTheme.RICH
    print("Branch symbols:")
    print(f"  Current: {GitBranch.CURRENT.get_char(theme)}")
    print(f"  Remote:  {GitBranch.REMOTE.get_char(theme)}")
    print(f"  Local:   {GitBranch.LOCAL.get_char(theme)}")
    print()

    print("Diff symbols:")
    print(f"  Added:   {GitDiff.ADDED.get_char(theme)}")
    print(f"  Removed: {GitDiff.REMOVED.get_char(theme)}")
    print(f"  Modified: {GitDiff.MODIFIED.get_char(theme)}")
    print()

    print("Realistic Git Status Display:")
    print("============================")

    set_global_config(UnicodeConfig.with_theme(UnicodeTheme.RICH))

    print(f"On branch {get_char(GitBranch.CURRENT)} main")
    print("Your branch is up to date with 'origin/main'.\n")

    print("Changes to be committed:")
    print('  (use "git reset HEAD <file>..." to unstage)\n')
    for file in SAMPLE_FILES:
        if file.status is GitStatus.ADDED:
            print(f"        {get_char(GitStatus.ADDED)} {file.path}")

    print("\nChanges not staged for commit:")
    print('  (use "git add <file>..." to update what will be committed)')
    print('  (use "git checkout -- <file>..." to discard changes in working directory)\n')
    for file in SAMPLE_FILES:
        if file.status in (GitStatus.MODIFIED, GitStatus.DELETED):
            print(f"        {get_char(file.status)} {file.path}")

    print("\nUntracked files:")
    print('  (use "git add <file>..." to include in what will be committed)\n')
    for file in SAMPLE_FILES:
        if file.status is GitStatus.UNTRACKED:
            print(f"        {get_char(file.status)} {file.path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())