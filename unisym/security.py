"""Detection of Unicode characters that are often abused in spoofing attacks.

The checks cover invisible and zero-width characters, bidirectional
controls, mixing of scripts (homograph attacks) and characters that are
easily confused with Latin letters.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

Finding = tuple[int, str, str]


@dataclass(frozen=True, repr=False)
class Script:
    """A writing system; unrecognised characters carry their own code point."""

    name: str
    code: int | None = None

    LATIN: ClassVar[Script]
    CYRILLIC: ClassVar[Script]
    GREEK: ClassVar[Script]
    ARABIC: ClassVar[Script]
    HEBREW: ClassVar[Script]
    CHINESE: ClassVar[Script]
    JAPANESE: ClassVar[Script]
    KOREAN: ClassVar[Script]
    THAI: ClassVar[Script]
    DEVANAGARI: ClassVar[Script]

    @classmethod
    def other(cls, code: int) -> Script:
        """Return the script used for a character outside every known range."""
        return cls("Other", code)

    def __str__(self) -> str:
        return self.name if self.code is None else f"{self.name}({self.code})"

    __repr__ = __str__


Script.LATIN = Script("Latin")
Script.CYRILLIC = Script("Cyrillic")
Script.GREEK = Script("Greek")
Script.ARABIC = Script("Arabic")
Script.HEBREW = Script("Hebrew")
Script.CHINESE = Script("Chinese")
Script.JAPANESE = Script("Japanese")
Script.KOREAN = Script("Korean")
Script.THAI = Script("Thai")
Script.DEVANAGARI = Script("Devanagari")


class RiskLevel(IntEnum):
    """Overall risk assessment, ordered from harmless to critical."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2
    CRITICAL = 3

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class SecurityAnalysis:
    """Result of analysing a text.

    Positions in ``invisible_chars`` and ``bidi_chars`` are UTF-8 byte
    offsets; ``scripts`` holds each distinct script in order of first use.
    """

    has_invisible_chars: bool
    has_bidi_overrides: bool
    has_mixed_scripts: bool
    has_confusables: bool
    invisible_chars: tuple[Finding, ...]
    bidi_chars: tuple[Finding, ...]
    scripts: tuple[Script, ...]
    risk_level: RiskLevel


def _codes(*items: int | tuple[int, int]) -> frozenset[str]:
    chars: set[str] = set()
    for item in items:
        if isinstance(item, tuple):
            low, high = item
            chars.update(chr(cp) for cp in range(low, high + 1))
        else:
            chars.add(chr(item))
    return frozenset(chars)


_INVISIBLE = _codes(
    0x00AD, 0x034F, 0x061C, 0x115F, 0x1160, 0x17B4, 0x17B5, 0x180E,
    (0x200B, 0x200F), (0x202A, 0x202E), (0x2060, 0x2064), (0x206A, 0x206F),
    0x3164, 0xFEFF, 0xFFA0, 0x1D159, (0x1D173, 0x1D17A),
)

_BIDI = _codes(0x061C, 0x200E, 0x200F, (0x202A, 0x202E), (0x2066, 0x2069))

_CONFUSABLE = frozenset(
    "аеорсухАВЕКМНОРСТУХ"
    "αβγδεζηθικλμνξοπρστυφχψω"
) | _codes((0x1D400, 0x1D419))

_SCRIPT_RANGES: tuple[tuple[int, int, Script], ...] = (
    (ord("A"), ord("Z"), Script.LATIN),
    (ord("a"), ord("z"), Script.LATIN),
    (0x0410, 0x044F, Script.CYRILLIC),
    (0x0401, 0x0401, Script.CYRILLIC),
    (0x0451, 0x0451, Script.CYRILLIC),
    (0x0391, 0x03C9, Script.GREEK),
    (0x0600, 0x06FF, Script.ARABIC),
    (0x0590, 0x05FF, Script.HEBREW),
    (0x4E00, 0x9FFF, Script.CHINESE),
    (0x3040, 0x309F, Script.JAPANESE),
    (0x30A0, 0x30FF, Script.JAPANESE),
    (0xAC00, 0xD7AF, Script.KOREAN),
    (0x0E00, 0x0E7F, Script.THAI),
    (0x0900, 0x097F, Script.DEVANAGARI),
)

# Digits, whitespace and ASCII punctuation are not a script of their own.
_COMMON = frozenset("0123456789 \t\n\r!?.,;:\"'()[]{}-_=+*/\\|@#$%^&~`")

_DESCRIPTIONS: dict[str, str] = {
    "\u00ad": "Soft Hyphen",
    "\u200b": "Zero Width Space",
    "\u200c": "Zero Width Non-Joiner",
    "\u200d": "Zero Width Joiner",
    "\u200e": "Left-to-Right Mark",
    "\u200f": "Right-to-Left Mark",
    "\u202a": "Left-to-Right Embedding",
    "\u202b": "Right-to-Left Embedding",
    "\u202c": "Pop Directional Formatting",
    "\u202d": "Left-to-Right Override",
    "\u202e": "Right-to-Left Override",
    "\u2060": "Word Joiner",
    "\ufeff": "Zero Width No-Break Space (BOM)",
}


def _require_char(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def _byte_offsets(text: str) -> Iterator[tuple[int, str]]:
    offset = 0
    for ch in text:
        yield offset, ch
        offset += len(ch.encode("utf-8", "surrogatepass"))


def is_invisible_char(ch: str) -> bool:
    """Return whether ``ch`` is invisible or zero-width."""
    return _require_char(ch) in _INVISIBLE


def is_bidi_char(ch: str) -> bool:
    """Return whether ``ch`` is a bidirectional control character."""
    return _require_char(ch) in _BIDI


def is_confusable_char(ch: str) -> bool:
    """Return whether ``ch`` commonly passes for a Latin letter."""
    return _require_char(ch) in _CONFUSABLE


def get_script(ch: str) -> Script:
    """Return the script that ``ch`` belongs to."""
    code = ord(_require_char(ch))
    for low, high, script in _SCRIPT_RANGES:
        if low <= code <= high:
            return script
    if ch in _COMMON:
        return Script.LATIN
    return Script.other(code)


def get_char_description(ch: str) -> str:
    """Return a human-readable name for a special character."""
    return _DESCRIPTIONS.get(_require_char(ch), "Unknown Special Character")


def _risk_level(
    invisible: tuple[Finding, ...],
    bidi: tuple[Finding, ...],
    mixed_scripts: bool,
    confusables: bool,
) -> RiskLevel:
    score = 0
    if invisible:
        score += 3
    if bidi:
        score += 4
    if mixed_scripts:
        score += 2
    if confusables:
        score += 2
    if len(invisible) > 3:
        score += 2
    if len(bidi) > 1:
        score += 2

    if score == 0:
        return RiskLevel.LOW
    if score <= 3:
        return RiskLevel.MEDIUM
    if score <= 6:
        return RiskLevel.HIGH
    return RiskLevel.CRITICAL


def analyze_text(text: str) -> SecurityAnalysis:
    """Analyse ``text`` for invisible, bidirectional, mixed-script and confusable characters."""
    invisible: list[Finding] = []
    bidi: list[Finding] = []
    scripts: dict[Script, None] = {}
    confusables = False

    for pos, ch in _byte_offsets(text):
        if ch in _INVISIBLE:
            invisible.append((pos, ch, get_char_description(ch)))
        if ch in _BIDI:
            bidi.append((pos, ch, get_char_description(ch)))
        scripts.setdefault(get_script(ch), None)
        if ch in _CONFUSABLE:
            confusables = True

    non_latin = sum(1 for script in scripts if script != Script.LATIN)
    mixed = non_latin > 1 or (non_latin == 1 and Script.LATIN in scripts)

    invisible_found = tuple(invisible)
    bidi_found = tuple(bidi)
    return SecurityAnalysis(
        has_invisible_chars=bool(invisible_found),
        has_bidi_overrides=bool(bidi_found),
        has_mixed_scripts=mixed,
        has_confusables=confusables,
        invisible_chars=invisible_found,
        bidi_chars=bidi_found,
        scripts=tuple(scripts),
        risk_level=_risk_level(invisible_found, bidi_found, mixed, confusables),
    )


def sanitize_text(text: str) -> str:
    """Return ``text`` without invisible and bidirectional control characters."""
    return "".join(ch for ch in text if ch not in _INVISIBLE and ch not in _BIDI)


def generate_security_report(text: str) -> str:
    """Return a multi-line, human-readable security report for ``text``."""
    analysis = analyze_text(text)
    lines = [
        "Unicode Security Analysis",
        "========================",
        "",
        f"Risk Level: {analysis.risk_level}",
        "",
    ]

    if analysis.has_invisible_chars:
        lines.append("⚠️  INVISIBLE CHARACTERS DETECTED:")
        lines.extend(
            f"  Position {pos}: U+{ord(ch):04X} ({desc})"
            for pos, ch, desc in analysis.invisible_chars
        )
        lines.append("")

    if analysis.has_bidi_overrides:
        lines.append("⚠️  BIDIRECTIONAL OVERRIDE CHARACTERS DETECTED:")
        lines.extend(
            f"  Position {pos}: U+{ord(ch):04X} ({desc})" for pos, ch, desc in analysis.bidi_chars
        )
        lines.append("")

    if analysis.has_mixed_scripts:
        lines.append("⚠️  MIXED SCRIPTS DETECTED (Potential Homograph Attack):")
        lines.extend(f"  {script}" for script in analysis.scripts)
        lines.append("")

    if analysis.has_confusables:
        lines.append("⚠️  CONFUSABLE CHARACTERS DETECTED")
        lines.append("")

    if analysis.risk_level is RiskLevel.LOW:
        lines.append("✅ No security concerns detected.")

    return "\n".join(lines) + "\n"