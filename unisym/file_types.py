"""File type and programming language indicators, with lookup by name."""

from __future__ import annotations

from enum import Enum

from unisym.theme import UnicodeProvider, UnicodeTheme


class FileType(UnicodeProvider, Enum):
    """Kinds of file-system entries."""

    FILE = "File"
    DIRECTORY = "Directory"
    EXECUTABLE = "Executable"
    SYMLINK = "SymLink"
    HIDDEN = "Hidden"
    CONFIG = "Config"
    DOCUMENTATION = "Documentation"
    IMAGE = "Image"
    VIDEO = "Video"
    AUDIO = "Audio"
    ARCHIVE = "Archive"
    DATABASE = "Database"
    LOG = "Log"
    TEMPORARY = "Temporary"
    BACKUP = "Backup"

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this file type under ``theme``."""
        return _FILE_TYPES[self][theme]


class LanguageType(UnicodeProvider, Enum):
    """Programming languages and source formats."""

    RUST = "Rust"
    JAVASCRIPT = "JavaScript"
    PYTHON = "Python"
    C = "C"
    JAVA = "Java"
    GO = "Go"
    HTML = "Html"
    CSS = "Css"
    JSON = "Json"
    XML = "Xml"
    YAML = "Yaml"
    TOML = "Toml"
    MARKDOWN = "Markdown"
    SHELL = "Shell"
    SQL = "Sql"
    DOCKER = "Docker"
    GIT = "Git"
    CODE = "Code"

    def get_char(self, theme: UnicodeTheme) -> str:
        """Return the character for this language under ``theme``."""
        return _LANGUAGES[self][theme]


def _themed(minimal: str, basic: str, rich: str, fancy: str) -> dict[UnicodeTheme, str]:
    return dict(zip(UnicodeTheme, (minimal, basic, rich, fancy)))


_FILE_TYPES: dict[FileType, dict[UnicodeTheme, str]] = {
    FileType.FILE: _themed("-", "•", "📄", "📋"),
    FileType.DIRECTORY: _themed("D", "/", "📁", "🗂"),
    FileType.EXECUTABLE: _themed("X", "*", "⚡", "🔧"),
    FileType.SYMLINK: _themed("L", "@", "🔗", "⛓"),
    FileType.HIDDEN: _themed(".", ".", "👁", "🕵"),
    FileType.CONFIG: _themed("C", "#", "⚙", "🔧"),
    FileType.DOCUMENTATION: _themed("D", "?", "📖", "📚"),
    FileType.IMAGE: _themed("I", "%", "🖼", "🎨"),
    FileType.VIDEO: _themed("V", "&", "🎬", "📹"),
    FileType.AUDIO: _themed("A", "~", "🎵", "🎶"),
    FileType.ARCHIVE: _themed("Z", "=", "📦", "🗜"),
    FileType.DATABASE: _themed("B", "#", "🗄", "💾"),
    FileType.LOG: _themed("L", "|", "📜", "📋"),
    FileType.TEMPORARY: _themed("T", "~", "⏳", "🗑"),
    FileType.BACKUP: _themed("B", "+", "💾", "🔄"),
}

_LANGUAGES: dict[LanguageType, dict[UnicodeTheme, str]] = {
    LanguageType.RUST: _themed("R", "R", "🦀", "⚙"),
    LanguageType.JAVASCRIPT: _themed("J", "J", "⚡", "📜"),
    LanguageType.PYTHON: _themed("P", "P", "🐍", "🐍"),
    LanguageType.C: _themed("C", "C", "⚡", "🔧"),
    LanguageType.JAVA: _themed("J", "J", "☕", "☕"),
    LanguageType.GO: _themed("G", "G", "🐹", "🚀"),
    LanguageType.HTML: _themed("H", "<", "🌐", "📄"),
    LanguageType.CSS: _themed("S", "#", "🎨", "✨"),
    LanguageType.JSON: _themed("{", "{", "📋", "🗂"),
    LanguageType.XML: _themed("<", "<", "📄", "🗃"),
    LanguageType.YAML: _themed("Y", ":", "📝", "⚙"),
    LanguageType.TOML: _themed("T", "=", "⚙", "🔧"),
    LanguageType.MARKDOWN: _themed("M", "#", "📝", "📖"),
    LanguageType.SHELL: _themed("$", "$", "🐚", "⚡"),
    LanguageType.SQL: _themed("Q", "Q", "🗄", "💾"),
    LanguageType.DOCKER: _themed("D", "□", "🐳", "📦"),
    LanguageType.GIT: _themed("G", "*", "🌿", "🔀"),
    LanguageType.CODE: _themed("C", "<", "💻", "⌨"),
}

_EXTENSION_GROUPS: dict[LanguageType, tuple[str, ...]] = {
    LanguageType.RUST: ("rs",),
    LanguageType.JAVASCRIPT: ("js", "jsx", "ts", "tsx", "mjs"),
    LanguageType.PYTHON: ("py", "pyw", "pyc", "pyo", "pyd"),
    LanguageType.C: ("c", "h", "cpp", "cxx", "cc", "hpp", "hxx"),
    LanguageType.JAVA: ("java", "class", "jar"),
    LanguageType.GO: ("go", "mod", "sum"),
    LanguageType.HTML: ("html", "htm", "xhtml"),
    LanguageType.CSS: ("css", "scss", "sass", "less"),
    LanguageType.JSON: ("json", "jsonc"),
    LanguageType.XML: ("xml", "xsd", "xsl", "xslt"),
    LanguageType.YAML: ("yml", "yaml"),
    LanguageType.TOML: ("toml",),
    LanguageType.MARKDOWN: ("md", "markdown", "mdown", "mkd", "mkdn"),
    LanguageType.SHELL: ("sh", "bash", "zsh", "fish", "csh", "tcsh"),
    LanguageType.SQL: ("sql", "mysql", "pgsql", "sqlite"),
    LanguageType.DOCKER: ("dockerfile", "containerfile"),
    LanguageType.GIT: ("gitignore", "gitattributes", "gitmodules"),
}

_EXTENSIONS: dict[str, LanguageType] = {
    ext: language for language, exts in _EXTENSION_GROUPS.items() for ext in exts
}

_CONFIG_NAMES = frozenset({"config", "configuration", "settings", "preferences"})
_DOC_NAMES = frozenset({"readme", "readme.md", "readme.txt", "doc", "docs"})


def get_file_type_from_extension(extension: str) -> LanguageType:
    """Map a file extension (without the dot, any case) to a language."""
    return _EXTENSIONS.get(extension.lower(), LanguageType.CODE)


def get_file_type_from_filename(filename: str) -> FileType:
    """Classify a file by its name alone."""
    lowered = filename.lower()
    if filename.startswith("."):
        return FileType.HIDDEN
    if filename.endswith((".tmp", ".temp")):
        return FileType.TEMPORARY
    if filename.endswith((".bak", ".backup")):
        return FileType.BACKUP
    if filename.endswith(".log"):
        return FileType.LOG
    if lowered in _CONFIG_NAMES:
        return FileType.CONFIG
    if lowered in _DOC_NAMES:
        return FileType.DOCUMENTATION
    return FileType.FILE