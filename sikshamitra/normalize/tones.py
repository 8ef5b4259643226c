"""Tone-mark and nasalization normalization for IAST text."""

import re
import unicodedata

from sikshamitra.normalize.characters import ANUDATTA, SVARITA, TICK, UDATTA


# Variant encodings -> canonical combining tone mark (four categories)
TONE_MAP: dict[str, str] = {
    "\u0951": SVARITA,  # Devanagari stress sign udatta
    "\u0952": ANUDATTA,  # Devanagari stress sign anudatta
    "\u0332": ANUDATTA,  # Combining low line
    "\u0320": ANUDATTA,  # Combining minus sign below
    "\u0321": ANUDATTA,  # Combining palatalized hook below
    "\u1cda": UDATTA,  # Vedic tone double svarita
    "\u0341": UDATTA,  # Combining acute tone mark
}

# Alternate spellings of anusvara and long e/o
LETTER_MAP: dict[str, str] = {
    "ṃ": "ṁ",
    "Ṃ": "Ṁ",
    "ō": "o",
    "Ō": "O",
    "ē": "e",
    "Ē": "E",
}

# Letters NFC composes with a macron below; the macron is an anudatta here
MACRON_BELOW_LETTERS: dict[str, str] = {
    "ḇ": "b", "Ḇ": "B",
    "ḏ": "d", "Ḏ": "D",
    "ḵ": "k", "Ḵ": "K",
    "ḻ": "l", "Ḻ": "L",
    "ṉ": "n", "Ṉ": "N",
    "ṟ": "r", "Ṟ": "R",
    "ṯ": "t", "Ṯ": "T",
    "ẖ": "h",
    "ẕ": "z", "Ẕ": "Z",
}

# Parenthesized legacy nasalization: (g)m, (g)ṁ, (g̱)m, (g̱)ṁ
NASAL_IDIOM_PATTERN = re.compile("\\(g" + ANUDATTA + "?\\)[mṁ]")

SVARA_NAMES: dict[str, str] = {
    "svarita": SVARITA,
    "anudatta": ANUDATTA,
    "udatta": UDATTA,
    "tick": TICK,
}


def _split_macron_below(text: str) -> str:
    return "".join(
        MACRON_BELOW_LETTERS[char] + ANUDATTA if char in MACRON_BELOW_LETTERS else char
        for char in text
    )


def _normalize_once(text: str) -> str:
    # Tones first: NFC would turn U+0341 into a plain acute accent
    result = text
    for variant, canonical in TONE_MAP.items():
        result = result.replace(variant, canonical)

    result = _split_macron_below(unicodedata.normalize("NFC", result))

    for variant, canonical in LETTER_MAP.items():
        result = result.replace(variant, canonical)

    return NASAL_IDIOM_PATTERN.sub("ṁ", result)


def normalize(text: str) -> str:
    """
    Normalize IAST text to canonical tone marks and letter spellings.

    Steps:
        1. Variant tone marks to one canonical mark per tone category
        2. Unicode NFC, keeping the anudatta macron separate from its letter
        3. ṃ/ō/ē to ṁ/o/e
        4. Parenthesized nasal idioms to ṁ

    Args:
        text: Input text

    Returns:
        Normalized text (normalizing again is a no-op)
    """
    # Repeat until stable: "(g)(g)ṁ" only collapses in a second round
    previous = None
    result = text
    while result != previous:
        previous = result
        result = _normalize_once(result)
    return result


def insert_svara(text: str, position: int, name: str) -> str:
    """
    Insert a canonical svara mark at a codepoint offset.

    Args:
        text: Input text
        position: Insertion offset (0..len(text))
        name: One of "svarita", "anudatta", "udatta", "tick"

    Returns:
        Text with the mark inserted

    Raises:
        ValueError: Unknown svara name or offset outside the text
    """
    mark = SVARA_NAMES.get(name)
    if mark is None:
        raise ValueError(f"Unknown svara: {name!r} (expected one of {', '.join(SVARA_NAMES)})")
    if not 0 <= position <= len(text):
        raise ValueError(f"Insertion offset {position} outside text of length {len(text)}")
    return text[:position] + mark + text[position:]
