import pytest

from unisym.git import GitAction, GitBranch, GitDiff, GitStatus
from unisym.theme import UnicodeConfig, UnicodeTheme


@pytest.mark.parametrize("theme", list(UnicodeTheme))
def test_every_member_yields_one_character(theme):
    for status in GitStatus:
        assert len(GitStatus.get_char(status, theme)) == 1
    for diff in GitDiff:
        assert len(GitDiff.get_char(diff, theme)) == 1
    for branch in GitBranch:
        assert len(GitBranch.get_char(branch, theme)) == 1
    for action in GitAction:
        assert len(GitAction.get_char(action, theme)) == 1


def test_minimal_theme_is_ascii():
    minimal = UnicodeTheme.MINIMAL
    for status in GitStatus:
        assert GitStatus.get_char(status, minimal).isascii()
    for diff in GitDiff:
        assert GitDiff.get_char(diff, minimal).isascii()
    for branch in GitBranch:
        assert GitBranch.get_char(branch, minimal).isascii()
    for action in GitAction:
        assert GitAction.get_char(action, minimal).isascii()


@pytest.mark.parametrize("theme", list(UnicodeTheme))
def test_unchanged_and_context_are_blank(theme):
    assert GitStatus.UNCHANGED.get_char(theme) == " "
    assert GitDiff.CONTEXT.get_char(theme) == " "


def test_status_characters_from_table():
    assert GitStatus.MODIFIED.get_char(UnicodeTheme.MINIMAL) == "M"
    assert GitStatus.MODIFIED.get_char(UnicodeTheme.RICH) == "●"
    assert GitStatus.MODIFIED.get_char(UnicodeTheme.FANCY) == "◐"
    assert GitStatus.ADDED.get_char(UnicodeTheme.RICH) == "✚"
    assert GitStatus.DELETED.get_char(UnicodeTheme.RICH) == "✖"
    assert GitStatus.UNTRACKED.get_char(UnicodeTheme.RICH) == "?"


def test_diff_branch_action_characters_from_table():
    assert GitDiff.ADDED.get_char(UnicodeTheme.RICH) == "▎"
    assert GitDiff.REMOVED.get_char(UnicodeTheme.RICH) == "▁"
    assert GitDiff.NO_NEWLINE.get_char(UnicodeTheme.MINIMAL) == "\\"
    assert GitBranch.CURRENT.get_char(UnicodeTheme.RICH) == "●"
    assert GitBranch.REMOTE.get_char(UnicodeTheme.RICH) == "⭐"
    assert GitBranch.LOCAL.get_char(UnicodeTheme.RICH) == "⎇"
    assert GitAction.CHERRY_PICK.get_char(UnicodeTheme.RICH) == "🍒"
    assert GitAction.PUSH.get_char(UnicodeTheme.FANCY) == "🚀"


def test_minimal_get_str_matches_char():
    minimal = UnicodeTheme.MINIMAL
    for status in GitStatus:
        assert GitStatus.get_str(status, minimal) == GitStatus.get_char(status, minimal)
    for diff in GitDiff:
        assert GitDiff.get_str(diff, minimal) == GitDiff.get_char(diff, minimal)
    for branch in GitBranch:
        assert GitBranch.get_str(branch, minimal) == GitBranch.get_char(branch, minimal)
    for action in GitAction:
        assert GitAction.get_str(action, minimal) == GitAction.get_char(action, minimal)


def test_rich_non_ascii_get_str_is_question_mark():
    assert GitStatus.ADDED.get_str(UnicodeTheme.RICH) == "?"


def test_fallback_config_uses_minimal_for_non_ascii():
    config = UnicodeConfig.with_theme(UnicodeTheme.RICH).with_fallback()
    assert config.get_char(GitStatus.ADDED) == GitStatus.ADDED.get_char(UnicodeTheme.MINIMAL)
    assert config.get_char(GitStatus.UNTRACKED) == "?"


def test_same_named_members_keep_their_own_glyphs():
    assert GitStatus.ADDED.get_char(UnicodeTheme.RICH) == "✚"
    assert GitDiff.ADDED.get_char(UnicodeTheme.RICH) == "▎"