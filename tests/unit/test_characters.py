"""Tests for IAST character classification."""

from sikshamitra.normalize.characters import (
    ANUDATTA,
    SVARITA,
    UnitTable,
    classify_consonant,
    classify_vowel,
    iast_for_shortcut,
    is_pause_glyph,
    is_tone_mark,
    is_transparent,
    vowel_ending_at,
)


def test_unit_table_longest_first():
    """Test that two-codepoint units win over their first codepoint."""
    table = UnitTable(["k", "kh", "a"])

    assert table.match("kha", 0) == "kh"
    assert table.match("ka", 0) == "k"
    assert table.match("a", 0) == "a"
    assert table.match("x", 0) is None
    assert "kh" in table
    assert len(table) == 3


def test_classify_aspirated_consonant():
    """Test aspirated consonants are single units."""
    assert classify_consonant("kha", 0) == "kh"
    assert classify_consonant("ṭhakkura", 0) == "ṭh"
    assert classify_consonant("bhakta", 0) == "bh"
    assert classify_consonant("ka", 0) == "k"


def test_classify_consonant_none():
    """Test vowels, punctuation and out-of-range positions."""
    assert classify_consonant("a", 0) is None
    assert classify_consonant("|", 0) is None
    assert classify_consonant("ka", 5) is None
    assert classify_consonant("ka", -1) is None


def test_anusvara_and_visarga_are_cluster_members():
    """Test ṁ, ṃ and ḥ classify as consonant units."""
    assert classify_consonant("ṁ", 0) == "ṁ"
    assert classify_consonant("ṃ", 0) == "ṃ"
    assert classify_consonant("ḥ", 0) == "ḥ"


def test_classify_vowel_diphthongs():
    """Test diphthongs are matched before short vowels."""
    assert classify_vowel("kai", 1) == "ai"
    assert classify_vowel("au", 0) == "au"
    assert classify_vowel("ā", 0) == "ā"
    assert classify_vowel("ṝ", 0) == "ṝ"
    assert classify_vowel("k", 0) is None


def test_vowel_ending_at_prefers_diphthong():
    """Test backward lookup sees "ai" rather than "i"."""
    assert vowel_ending_at("kai", 2) == "ai"
    assert vowel_ending_at("kau", 2) == "au"
    assert vowel_ending_at("ki", 1) == "i"
    assert vowel_ending_at("ki", 0) is None


def test_tone_marks():
    """Test canonical and variant tone marks."""
    assert is_tone_mark(SVARITA)
    assert is_tone_mark(ANUDATTA)
    assert is_tone_mark("\u0952")
    assert not is_tone_mark("a")
    assert not is_tone_mark("|")


def test_transparent_characters():
    """Test the pause glyph and tone marks are transparent."""
    assert is_pause_glyph("|")
    assert is_transparent("|")
    assert is_transparent(ANUDATTA)
    assert not is_transparent(" ")
    assert not is_transparent("k")


def test_iast_shortcuts():
    """Test F9 shortcut lookup."""
    assert iast_for_shortcut("a") == "ā"
    assert iast_for_shortcut("T") == "ṭh"
    assert iast_for_shortcut("m") == "ṁ"
    assert iast_for_shortcut("x") is None


def test_capitals_match_lowercase_units():
    """Test capitals classify as their lowercase units with the same width."""
    assert classify_consonant("Kha", 0) == "kh"
    assert classify_consonant("ṬH", 0) == "ṭh"
    assert classify_vowel("AI", 0) == "ai"
    assert vowel_ending_at("kAI", 2) == "ai"
    assert vowel_ending_at("Ā", 0) == "ā"
