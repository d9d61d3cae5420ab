# unisym

Consistent symbols for terminal applications, editors and command-line
tools. Every symbol comes in four themes, so the same code can draw plain
ASCII on a limited terminal and rich Unicode or emoji on a modern one.

The package also has helpers that find dangerous Unicode in text: invisible
characters, bidirectional controls, mixed scripts and look-alike characters.

## Installation

```
pip install unisym
```

It has no dependencies beyond the standard library.

## Themes

`unisym.theme.UnicodeTheme` has four members:

| Theme     | Meaning                            |
|-----------|------------------------------------|
| `MINIMAL` | ASCII only                         |
| `BASIC`   | Simple Unicode symbols             |
| `RICH`    | Full Unicode symbol set (default)  |
| `FANCY`   | Decorative Unicode and emoji       |

| Symbol       | Minimal | Basic | Rich | Fancy |
|--------------|---------|-------|------|-------|
| Check        | `v`     | `✓`   | `✓`  | `✅`  |
| Arrow right  | `>`     | `→`   | `→`  | `➡`   |
| Git modified | `M`     | `●`   | `●`  | `◐`   |

## Usage

Every symbol group is an enum whose members have `get_char(theme)`, which
returns a one-character string:

```python
from unisym.theme import UnicodeTheme
from unisym.symbols import Symbol
from unisym.arrows import Arrow

Symbol.CHECK.get_char(UnicodeTheme.MINIMAL)  # 'v'
Symbol.CHECK.get_char(UnicodeTheme.RICH)     # '✓'
Arrow.RIGHT.get_char(UnicodeTheme.RICH)      # '→'
```

`get_str(theme)` returns the same character when it is printable ASCII and
`"?"` otherwise.

### Configuration

`UnicodeConfig` holds a theme, a fallback flag and named overrides. Its
builder methods return new configs and leave the original unchanged:

```python
from unisym.theme import UnicodeConfig, UnicodeTheme, set_global_config, get_char
from unisym.symbols import Symbol

set_global_config(UnicodeConfig.with_theme(UnicodeTheme.MINIMAL))
get_char(Symbol.CHECK)  # 'v'

config = (
    UnicodeConfig.with_theme(UnicodeTheme.RICH)
    .with_fallback()                     # non-ASCII characters fall back to MINIMAL
    .with_override("custom_check", "√")  # named overrides win over the theme
)
set_global_config(config)
get_char(Symbol.CHECK, "custom_check")  # '√'
get_char(Symbol.CHECK)                  # 'v' (fallback, since '✓' is not ASCII)
```

- `UnicodeConfig.get_char(provider, key=None)` resolves a character: an
  override for `key` first, then the theme, then the fallback.
- `with_override` raises `ValueError` unless the character is a single
  character.
- `set_global_config` and `get_global_config` store and return copies of the
  process-wide configuration under a lock; the default is `RICH` with no
  fallback and no overrides.
- The module-level `get_char(provider, key=None)` uses the global
  configuration. The module-level `get_str(provider, key=None)` returns
  `" "` for a space and `"?"` for any other character.

### Symbol groups

- `unisym.symbols` – `Symbol`: check, X, exclamation, question, at, hash,
  dollar, percent, ampersand, copyright, trademark, registered
- `unisym.arrows` – `Arrow`, `Navigation`
- `unisym.blocks` – `Block`: block and shade elements for bars and charts
- `unisym.shapes` – `Shape`
- `unisym.editor` – `Cursor`, `Selection`
- `unisym.git` – `GitStatus`, `GitDiff`, `GitBranch`, `GitAction`
- `unisym.status` – `Status`
- `unisym.ui` – `Border`, `Control`, `Separator`, `Indicator`
- `unisym.file_types` – `FileType`, `LanguageType`,
  `get_file_type_from_extension` and `get_file_type_from_filename`

`get_file_type_from_extension` takes an extension without the dot, in any
case, and returns a `LanguageType` (`CODE` when it is not recognised).
`get_file_type_from_filename` classifies a name as hidden, temporary, backup,
log, config, documentation or a plain `FILE`.

```python
from unisym.file_types import get_file_type_from_extension, get_file_type_from_filename
from unisym.theme import UnicodeTheme

get_file_type_from_extension("py").get_char(UnicodeTheme.RICH)  # '🐍'
get_file_type_from_filename("server.log")                       # FileType.LOG
```

## Unicode security

```python
from unisym.security import analyze_text, sanitize_text, generate_security_report, RiskLevel

analysis = analyze_text("filename\u202egpj.exe")
analysis.has_bidi_overrides                  # True
analysis.risk_level is RiskLevel.CRITICAL    # True

sanitize_text("Hello\u200bWorld\u202eTest")  # 'HelloWorldTest'
print(generate_security_report("Hello\u200bWorld"))
```

`analyze_text` returns a frozen `SecurityAnalysis` with:

- `has_invisible_chars`, `has_bidi_overrides`, `has_mixed_scripts`,
  `has_confusables`
- `invisible_chars` and `bidi_chars`: tuples of `(position, character,
  description)`, where the position is a UTF-8 byte offset
- `scripts`: each distinct `Script` in order of first appearance; digits,
  whitespace and ASCII punctuation count as Latin, and characters outside the
  known ranges get `Script.other(code_point)`
- `risk_level`: a `RiskLevel` ordered `LOW < MEDIUM < HIGH < CRITICAL`

Single-character checks are also available: `is_invisible_char`,
`is_bidi_char`, `is_confusable_char`, `get_script` and `get_char_description`.
They raise `ValueError` when given anything but a single character.

The confusable set is a small fixed list of Cyrillic, Greek and mathematical
bold letters, not a full confusables table, and text is not normalised before
it is checked.

## Demonstrations

Four commands print sample output:

```
unisym-demo-basic          # themes and global configuration
unisym-demo-git-status     # a git status listing in each theme
unisym-demo-file-browser   # file type icons for a directory listing
unisym-demo-security       # analysis of suspicious sample strings
```

The listings are built from fixed sample data; the demos do not read a real
repository or directory. Each one sets the global configuration while it runs.

## Running the tests

```
pip install "unisym[test]"
pytest
```