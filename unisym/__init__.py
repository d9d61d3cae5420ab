"""Themed Unicode symbols for terminal tools, with ASCII fallbacks and Unicode security checks."""

__version__ = "0.1.0"

__all__ = [
    "arrows",
    "blocks",
    "editor",
    "file_types",
    "git",
    "security",
    "shapes",
    "status",
    "symbols",
    "theme",
    "ui",
]