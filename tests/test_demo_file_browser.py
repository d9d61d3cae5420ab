import pytest

from unisym.demo_file_browser import SAMPLE_FILES, FileEntry, main
from unisym.file_types import FileType, LanguageType
from unisym.theme import UnicodeConfig, UnicodeTheme, get_global_config, set_global_config


@pytest.fixture(autouse=True)
def _restore_global_config():
    saved = get_global_config()
    yield
    set_global_config(saved)


@pytest.mark.parametrize(
    ("name", "is_directory", "extension"),
    [
        ("main.rs", False, "rs"),
        ("Cargo.toml", False, "toml"),
        ("src", True, None),
        ("dir.with.dots", True, None),
        ("unknown_file", False, None),
        (".gitignore", False, None),
    ],
)
def test_from_name_extension(name, is_directory, extension):
    entry = FileEntry.from_name(name, is_directory)
    assert entry.name == name
    assert entry.is_directory is is_directory
    assert entry.extension == extension


def test_from_name_takes_last_extension():
    assert FileEntry.from_name("archive.tar.gz", False).extension == "gz"


def test_kind_resolution():
    assert FileEntry.from_name("src", True).kind() is FileType.DIRECTORY
    assert FileEntry.from_name("main.rs", False).kind() is LanguageType.RUST
    assert FileEntry.from_name("unknown_file", False).kind() is FileType.FILE
    assert FileEntry.from_name("image.png", False).kind() is LanguageType.CODE


def test_main_prints_entries_in_each_theme(capsys):
    set_global_config(UnicodeConfig.with_theme(UnicodeTheme.MINIMAL))
    assert main([]) == 0
    out = capsys.readouterr().out
    for theme in (UnicodeTheme.MINIMAL, UnicodeTheme.RICH):
        rust = LanguageType.RUST.get_char(theme)
        directory = FileType.DIRECTORY.get_char(theme)
        assert f"  {rust} main.rs (Rust)" in out
        assert f"  {directory} src (Directory)" in out
    assert "component.tsx (JavaScript)" in out
    assert "unknown_file (File)" in out


def test_main_prints_counts_and_sets_rich_theme(capsys):
    set_global_config(UnicodeConfig.with_theme(UnicodeTheme.MINIMAL))
    main([])
    out = capsys.readouterr().out
    directories = sum(entry.is_directory for entry in SAMPLE_FILES)
    files = len(SAMPLE_FILES) - directories
    assert f"File count: {directories} directories, {files} files" in out
    assert "File count: 3 directories, 17 files" in out
    assert get_global_config().theme is UnicodeTheme.RICH
    assert f"├── {FileType.CONFIG.get_char(UnicodeTheme.RICH)} Cargo.toml" in out


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])