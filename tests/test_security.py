import pytest

from unisym.security import (
    RiskLevel,
    Script,
    analyze_text,
    generate_security_report,
    get_char_description,
    get_script,
    is_bidi_char,
    is_confusable_char,
    is_invisible_char,
    sanitize_text,
)


def test_safe_text():
    analysis = analyze_text("Hello World")
    assert analysis.risk_level == RiskLevel.LOW
    assert not analysis.has_invisible_chars
    assert not analysis.has_bidi_overrides
    assert not analysis.has_confusables


def test_invisible_characters():
    analysis = analyze_text("Hello\u200bWorld")
    assert analysis.has_invisible_chars
    assert len(analysis.invisible_chars) == 1
    assert analysis.invisible_chars[0][1] == "\u200b"
    assert analysis.risk_level >= RiskLevel.HIGH


def test_bidi_override():
    analysis = analyze_text("filename\u202egpj.exe")
    assert analysis.has_bidi_overrides
    assert len(analysis.bidi_chars) == 1
    assert analysis.bidi_chars[0][1] == "\u202e"
    assert analysis.risk_level == RiskLevel.CRITICAL


def test_mixed_scripts():
    analysis = analyze_text("раураӏ.com")
    assert analysis.has_mixed_scripts
    assert len(analysis.scripts) > 1
    assert analysis.risk_level >= RiskLevel.HIGH


def test_sanitization():
    sanitized = sanitize_text("Hello\u200bWorld\u202eTest")
    assert sanitized == "HelloWorldTest"
    assert analyze_text(sanitized).risk_level == RiskLevel.LOW


def test_sanitize_doc_example():
    assert sanitize_text("Hello\u200bWorld\u202e") == "HelloWorld"


def test_sanitize_is_idempotent():
    once = sanitize_text("a\u200b\u2066b\ufeffc")
    assert sanitize_text(once) == once
    assert not analyze_text(once).has_invisible_chars


def test_character_detection():
    assert is_invisible_char("\u200b")
    assert is_invisible_char("\ufeff")
    assert not is_invisible_char("a")

    assert is_bidi_char("\u202e")
    assert is_bidi_char("\u200f")
    assert not is_bidi_char("a")

    assert is_confusable_char("а")
    assert is_confusable_char("α")
    assert not is_confusable_char("a")


def test_isolates_are_bidi_but_not_invisible():
    assert is_bidi_char("\u2066")
    assert not is_invisible_char("\u2066")


def test_script_detection():
    assert get_script("a") == Script.LATIN
    assert get_script("А") == Script.CYRILLIC
    assert get_script("α") == Script.GREEK
    assert get_script("世") == Script.CHINESE


def test_punctuation_counts_as_latin():
    assert get_script("7") == Script.LATIN
    assert get_script(".") == Script.LATIN


def test_unknown_script_keeps_code_point():
    assert get_script("ӏ") == Script.other(0x04CF)
    assert str(Script.other(0x04CF)) == "Other(1231)"
    assert str(Script.LATIN) == "Latin"


def test_risk_calculation():
    assert analyze_text("Hello World").risk_level == RiskLevel.LOW
    assert analyze_text("Hello\u200bWorld").risk_level >= RiskLevel.HIGH
    assert analyze_text("test\u202eevil").risk_level == RiskLevel.CRITICAL


def test_single_script_confusables_are_medium():
    analysis = analyze_text("αβγ")
    assert not analysis.has_mixed_scripts
    assert analysis.has_confusables
    assert analysis.risk_level == RiskLevel.MEDIUM


def test_risk_levels_are_ordered():
    low = analyze_text("Hello World").risk_level
    medium = analyze_text("αβγ").risk_level
    high = analyze_text("Hello\u200bWorld").risk_level
    critical = analyze_text("test\u202eevil").risk_level
    assert low == RiskLevel.LOW
    assert medium == RiskLevel.MEDIUM
    assert high == RiskLevel.HIGH
    assert critical == RiskLevel.CRITICAL
    assert low < medium < high < critical


def test_security_report():
    report = generate_security_report("Hello\u200bWorld")
    assert "INVISIBLE CHARACTERS DETECTED" in report
    assert "U+200B" in report
    assert "Zero Width Space" in report


def test_security_report_for_safe_text():
    report = generate_security_report("Hello World")
    assert report.startswith("Unicode Security Analysis\n")
    assert "Risk Level: Low" in report
    assert "✅ No security concerns detected." in report


def test_positions_are_byte_offsets():
    analysis = analyze_text("Hello\u200bWorld")
    assert analysis.invisible_chars[0] == (5, "\u200b", "Zero Width Space")
    assert analyze_text("é\u200b").invisible_chars[0][0] == 2


def test_descriptions():
    assert get_char_description("\u202e") == "Right-to-Left Override"
    assert get_char_description("x") == "Unknown Special Character"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_multi_character_input_rejected(bad):
    with pytest.raises(ValueError):
        get_script(bad)
    with pytest.raises(ValueError):
        is_invisible_char(bad)