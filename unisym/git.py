"""Git status, diff, branch and action symbols."""

from __future__ import annotations

from enum import Enum, auto

from unisym.theme import UnicodeProvider, UnicodeTheme


class GitStatus(UnicodeProvider, Enum):
    """Git file status indicators."""

    MODIFIED = auto()
    ADDED = auto()
    DELETED = auto()
    RENAMED = auto()
    COPIED = auto()
    UNTRACKED = auto()
    STAGED = auto()
    IGNORED = auto()
    CONFLICTED = auto()
    UNCHANGED = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this file status under ``theme``."""
        return _STATUS[self][theme]


class GitDiff(UnicodeProvider, Enum):
    """Git diff line indicators."""

    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()
    CONTEXT = auto()
    NO_NEWLINE = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this diff line kind under ``theme``."""
        return _DIFF[self][theme]


class GitBranch(UnicodeProvider, Enum):
    """Git branch indicators."""

    CURRENT = auto()
    REMOTE = auto()
    LOCAL = auto()
    DETACHED = auto()
    AHEAD = auto()
    BEHIND = auto()
    DIVERGED = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this branch state under ``theme``."""
        return _BRANCH[self][theme]


class GitAction(UnicodeProvider, Enum):
    """Git action indicators."""

    STAGE = auto()
    UNSTAGE = auto()
    COMMIT = auto()
    PUSH = auto()
    PULL = auto()
    MERGE = auto()
    REBASE = auto()
    CHERRY_PICK = auto()
    STASH = auto()
    TAG = auto()

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this action under ``theme``."""
        return _ACTION[self][theme]


def _themed(minimal: str, basic: str, rich: str, fancy: str) -> dict[UnicodeTheme, str]:
    return dict(zip(UnicodeTheme, (minimal, basic, rich, fancy)))


def _same(char: str) -> dict[UnicodeTheme, str]:
    return _themed(char, char, char, char)


_STATUS: dict[GitStatus, dict[UnicodeTheme, str]] = {
    GitStatus.MODIFIED: _themed("M", "●", "●", "◐"),
    GitStatus.ADDED: _themed("+", "+", "✚", "⊕"),
    GitStatus.DELETED: _themed("-", "-", "✖", "⊖"),
    GitStatus.RENAMED: _themed("R", ">", "➜", "⤷"),
    GitStatus.COPIED: _themed("C", "=", "⧉", "⎘"),
    GitStatus.UNTRACKED: _themed("?", "?", "?", "❓"),
    GitStatus.STAGED: _themed("S", "*", "✓", "✅"),
    GitStatus.IGNORED: _themed("I", ".", "⊘", "🚫"),
    GitStatus.CONFLICTED: _themed("!", "!", "⚠", "⚡"),
    GitStatus.UNCHANGED: _same(" "),
}

_DIFF: dict[GitDiff, dict[UnicodeTheme, str]] = {
    GitDiff.ADDED: _themed("+", "+", "▎", "┃"),
    GitDiff.REMOVED: _themed("-", "-", "▁", "━"),
    GitDiff.MODIFIED: _themed("~", "~", "▎", "┃"),
    GitDiff.CONTEXT: _same(" "),
    GitDiff.NO_NEWLINE: _themed("\\", "\\", "⏎", "↵"),
}

_BRANCH: dict[GitBranch, dict[UnicodeTheme, str]] = {
    GitBranch.CURRENT: _themed("*", "*", "●", "🌿"),
    GitBranch.REMOTE: _themed("R", "@", "⭐", "☁"),
    GitBranch.LOCAL: _themed("L", "|", "⎇", "🌱"),
    GitBranch.DETACHED: _themed("D", "?", "⚠", "🔗"),
    GitBranch.AHEAD: _themed("^", "^", "↑", "⬆"),
    GitBranch.BEHIND: _themed("v", "v", "↓", "⬇"),
    GitBranch.DIVERGED: _themed("<", "<", "↕", "🔀"),
}

_ACTION: dict[GitAction, dict[UnicodeTheme, str]] = {
    GitAction.STAGE: _themed("+", "+", "⊕", "📥"),
    GitAction.UNSTAGE: _themed("-", "-", "⊖", "📤"),
    GitAction.COMMIT: _themed("C", "*", "✓", "💾"),
    GitAction.PUSH: _themed("^", "^", "↑", "🚀"),
    GitAction.PULL: _themed("v", "v", "↓", "⬇"),
    GitAction.MERGE: _themed("M", "&", "⚡", "🔀"),
    GitAction.REBASE: _themed("R", "~", "⤴", "🔄"),
    GitAction.CHERRY_PICK: _themed("P", "o", "🍒", "🍒"),
    GitAction.STASH: _themed("S", "#", "📦", "📦"),
    GitAction.TAG: _themed("T", "@", "🏷", "🏷"),
}