"""Demonstration of the Unicode security checks on sample texts."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence

from unisym.security import (
    RiskLevel,
    SecurityAnalysis,
    analyze_text,
    generate_security_report,
    get_char_description,
    is_bidi_char,
    is_confusable_char,
    is_invisible_char,
    sanitize_text,
)

_RISK_BADGES: dict[RiskLevel, str] = {
    RiskLevel.LOW: "🟢 LOW",
    RiskLevel.MEDIUM: "🟡 MEDIUM",
    RiskLevel.HIGH: "🟠 HIGH",
    RiskLevel.CRITICAL: "🔴 CRITICAL",
}

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _quoted(text: str) -> str:
    """Quote ``text``, escaping control and non-printable characters."""
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            parts.append(f"\\u{{{ord(ch):x}}}")
    return '"' + "".join(parts) + '"'


def _byte_offsets(text: str) -> Iterator[tuple[int, str]]:
    offset = 0
    for ch in text:
        yield offset, ch
        offset += len(ch.encode("utf-8"))


def analyze_and_report(text: str) -> SecurityAnalysis:
    """Print a summary of the findings for ``text`` and return the analysis."""
    print(f"Text: {_quoted(text)}")

    analysis = analyze_text(text)
    print(f"Risk Level: {_RISK_BADGES[analysis.risk_level]}")

    if analysis.has_invisible_chars:
        print(f"⚠️  {len(analysis.invisible_chars)} invisible character(s) detected")
    if analysis.has_bidi_overrides:
        print(f"⚠️  {len(analysis.bidi_chars)} bidirectional override(s) detected")
    if analysis.has_mixed_scripts:
        print(f"⚠️  Mixed scripts detected ({len(analysis.scripts)} different scripts)")
    if analysis.has_confusables:
        print("⚠️  Confusable characters detected")

    if analysis.risk_level is RiskLevel.LOW:
        print("✅ No security concerns detected")

    if analysis.risk_level >= RiskLevel.HIGH:
        print("\nDetailed Security Report:")
        print(generate_security_report(text))

    return analysis


def main(argv: Sequence[str] | None = None) -> int:
    """Run the security checks over a series of sample texts."""
    argparse.ArgumentParser(description="Show Unicode security analysis examples.").parse_args(argv)

    print("Unicode Security Analysis Example")
    print("=================================\n")

    print("1. Analyzing safe text:")
    analyze_and_report("Hello World! This is normal text.")

    print("\n2. Analyzing text with invisible characters:")
    analyze_and_report("Hello\u200bWorld\u200cTest")

    print("\n3. Analyzing bidirectional override attack:")
    analyze_and_report("filename\u202egpj.exe")

    print("\n4. Analyzing potential homograph attack:")
    analyze_and_report("раураӏ.com")

    print("\n5. Analyzing mixed script text:")
    analyze_and_report("Secure Bank αccount Login")

    print("\n6. Analyzing complex multi-vector attack:")
    analyze_and_report("bank\u200blogin\u202emoc.evil")

    print("\n7. Text sanitization example:")
    dangerous = "Hello\u200bWorld\u202eDangerous\u200cText"
    print(f"Original: {_quoted(dangerous)}")
    sanitized = sanitize_text(dangerous)
    print(f"Sanitized: {_quoted(sanitized)}")
    safe = analyze_text(sanitized).risk_level is RiskLevel.LOW
    print(f"Safe to use: {'true' if safe else 'false'}")

    print("\n8. Character-by-character analysis:")
    for pos, ch in _byte_offsets("a\u200bb\u202ec"):
        print(f"  Position {pos}: '{ch}' (U+{ord(ch):04X})")
        if is_invisible_char(ch):
            print(f"    ⚠️  Invisible character: {get_char_description(ch)}")
        if is_bidi_char(ch):
            print(f"    ⚠️  Bidirectional character: {get_char_description(ch)}")
        if is_confusable_char(ch):
            print("    ⚠️  Potentially confusable character")

    print("\n9. Script detection example:")
    multi_script = "Hello мир 世界 שלום"
    analysis = analyze_text(multi_script)
    print(f"Text: {multi_script}")
    print("Detected scripts:")
    for script in analysis.scripts:
        print(f"  - {script}")

    print("\n10. Security recommendations:")
    print("✅ Always validate user input for invisible characters")
    print("✅ Check for bidirectional override attacks in filenames")
    print("✅ Be aware of homograph attacks in domain names")
    print("✅ Consider normalizing Unicode text before processing")
    print("✅ Use allowlists for acceptable character ranges when possible")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())