"""Transliteration between Devanagari and IAST."""

from collections.abc import Iterable
from typing import TypeVar

from sikshamitra.normalize.characters import ANUDATTA, OM, SVARITA, UDATTA, UnitTable


T = TypeVar("T")

DEVANAGARI = "devanagari"
IAST = "iast"
TRANSLITERATION_SCHEMES = (DEVANAGARI, IAST)

VIRAMA = "्"
OM_LIGATURE = "ॐ"

# Both anusvara spellings read as the om ligature
OM_SPELLINGS = frozenset({OM, "oṃ"})

CONSONANTS: dict[str, str] = {
    # Velars
    "क": "k", "ख": "kh", "ग": "g", "घ": "gh", "ङ": "ṅ",
    # Palatals
    "च": "c", "छ": "ch", "ज": "j", "झ": "jh", "ञ": "ñ",
    # Retroflexes
    "ट": "ṭ", "ठ": "ṭh", "ड": "ḍ", "ढ": "ḍh", "ण": "ṇ",
    # Dentals
    "त": "t", "थ": "th", "द": "d", "ध": "dh", "न": "n",
    # Labials
    "प": "p", "फ": "ph", "ब": "b", "भ": "bh", "म": "m",
    # Semivowels
    "य": "y", "र": "r", "ल": "l", "व": "v",
    # Sibilants and aspirate
    "श": "ś", "ष": "ṣ", "स": "s", "ह": "h",
}

VOWELS: dict[str, str] = {
    "अ": "a", "आ": "ā", "इ": "i", "ई": "ī", "उ": "u", "ऊ": "ū",
    "ऋ": "ṛ", "ॠ": "ṝ", "ऌ": "ḷ", "ॡ": "ḹ",
    "ए": "e", "ऐ": "ai", "ओ": "o", "औ": "au",
}

VOWEL_SIGNS: dict[str, str] = {
    "ा": "ā", "ि": "i", "ी": "ī", "ु": "u", "ू": "ū",
    "ृ": "ṛ", "ॄ": "ṝ", "ॢ": "ḷ", "ॣ": "ḹ",
    "े": "e", "ै": "ai", "ो": "o", "ौ": "au",
}

PUNCTUATION: dict[str, str] = {
    "।": "|",  # Danda
    "॥": "||",  # Double danda
    "ं": "ṁ",  # Anusvara
    "ँ": "m\u0310",  # Candrabindu
    "ः": "ḥ",  # Visarga
    "ऽ": "'",  # Avagraha
    "\u0951": SVARITA,
    "\u0952": ANUDATTA,
    "\u1cda": UDATTA,
}

DIGITS: dict[str, str] = {
    "०": "0", "१": "1", "२": "2", "३": "3", "४": "4",
    "५": "5", "६": "6", "७": "7", "८": "8", "९": "9",
}

# Reverse direction
IAST_CONSONANTS = {latin: glyph for glyph, latin in CONSONANTS.items()}
IAST_VOWELS = {latin: glyph for glyph, latin in VOWELS.items()}
IAST_VOWEL_SIGNS = {latin: glyph for glyph, latin in VOWEL_SIGNS.items()}
IAST_SYMBOLS = {latin: glyph for glyph, latin in {**PUNCTUATION, **DIGITS}.items()}
IAST_SYMBOLS["ṃ"] = "ं"

# Aspirate + inherent "a": the vowel is implicit in the glyph
ASPIRATES_WITH_A = {
    latin + "a": glyph for latin, glyph in IAST_CONSONANTS.items() if len(latin) == 2
}

_IAST_UNITS = UnitTable([*IAST_CONSONANTS, *IAST_VOWELS, *IAST_SYMBOLS])
_IAST_VOWEL_SIGN_UNITS = UnitTable(["a", *IAST_VOWEL_SIGNS])

# Characters that end a word for virama placement
BOUNDARY_PUNCTUATION = frozenset("|.,;:!?-()[]{}\"")


def to_latin_diacritic(text: str) -> str:
    """
    Transliterate Devanagari to IAST.

    A consonant takes the following vowel sign, loses its inherent "a" before
    a virama (a virama followed by a consonant forms a conjunct), and keeps
    the inherent "a" otherwise. Unrecognized characters pass through.

    Args:
        text: Devanagari text

    Returns:
        IAST text
    """
    result: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        char = text[i]

        if char in CONSONANTS:
            result.append(CONSONANTS[char])
            following = text[i + 1] if i + 1 < n else ""

            if following in VOWEL_SIGNS:
                result.append(VOWEL_SIGNS[following])
                i += 2
            elif following == VIRAMA:
                # Bare consonant; a consonant after the virama continues the conjunct
                i += 2
            else:
                result.append("a")
                i += 1
            continue

        if char == OM_LIGATURE:
            result.append(OM)
        elif char in VOWELS:
            result.append(VOWELS[char])
        elif char in PUNCTUATION:
            result.append(PUNCTUATION[char])
        elif char in DIGITS:
            result.append(DIGITS[char])
        else:
            result.append(char)
        i += 1

    return "".join(result)


def _match_iast(table: UnitTable, text: str, pos: int) -> tuple[str, int] | None:
    """Longest case-insensitive match; returns (lowercase unit, width)."""
    for width in (2, 1):
        candidate = text[pos : pos + width].lower()
        if len(candidate) == width and candidate in table:
            return candidate, width
    return None


def _is_word_boundary(text: str, pos: int) -> bool:
    return pos >= len(text) or text[pos].isspace() or text[pos] in BOUNDARY_PUNCTUATION


def _starts_consonant(text: str, pos: int) -> bool:
    match = _match_iast(_IAST_UNITS, text, pos)
    return match is not None and match[0] in IAST_CONSONANTS


def _attach_vowel(text: str, pos: int, result: list[str]) -> int:
    """
    Resolve what follows a consonant glyph.

    Returns:
        Position after any consumed vowel
    """
    match = _match_iast(_IAST_VOWEL_SIGN_UNITS, text, pos)
    if match is not None:
        sign, width = match
        if sign != "a":
            result.append(IAST_VOWEL_SIGNS[sign])
        return pos + width

    if _starts_consonant(text, pos) or _is_word_boundary(text, pos):
        result.append(VIRAMA)
    return pos


def to_alphasyllabic(text: str) -> str:
    """
    Transliterate IAST to Devanagari.

    Matching is longest-first at every position. Capitalized letters are
    read as their lowercase forms. Unrecognized characters pass through.

    Args:
        text: IAST text

    Returns:
        Devanagari text
    """
    result: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        if text[i : i + len(OM)].lower() in OM_SPELLINGS:
            result.append(OM_LIGATURE)
            i += len(OM)
            continue

        triple = text[i : i + 3].lower()
        if triple in ASPIRATES_WITH_A and text[i + 3 : i + 4].lower() not in ("i", "u"):
            result.append(ASPIRATES_WITH_A[triple])
            i += 3
            continue

        match = _match_iast(_IAST_UNITS, text, i)
        if match is None:
            result.append(text[i])
            i += 1
            continue

        unit, width = match
        i += width
        if unit in IAST_CONSONANTS:
            result.append(IAST_CONSONANTS[unit])
            i = _attach_vowel(text, i, result)
        elif unit in IAST_VOWELS:
            result.append(IAST_VOWELS[unit])
        else:
            result.append(IAST_SYMBOLS[unit])

    return "".join(result)


def transliterate(
    text: str,
    from_scheme: str = DEVANAGARI,
    to_scheme: str = IAST,
) -> str:
    """
    Transliterate text between schemes.

    Args:
        text: Input text
        from_scheme: Source scheme ("devanagari" or "iast")
        to_scheme: Target scheme ("devanagari" or "iast")

    Returns:
        Transliterated text

    Raises:
        ValueError: Unsupported scheme
    """
    for scheme in (from_scheme, to_scheme):
        if scheme not in TRANSLITERATION_SCHEMES:
            raise ValueError(
                f"Unsupported scheme: {scheme!r} (expected one of {', '.join(TRANSLITERATION_SCHEMES)})"
            )

    if from_scheme == to_scheme:
        return text
    if to_scheme == IAST:
        return to_latin_diacritic(text)
    return to_alphasyllabic(text)


def transliterate_runs(
    runs: Iterable[tuple[str, T]],
    to_scheme: str,
) -> list[tuple[str, T]]:
    """
    Transliterate formatted runs, keeping each run's attributes.

    Each run is converted on its own, so formatting is never split or merged.

    Args:
        runs: (text, attributes) pairs
        to_scheme: Target scheme

    Returns:
        (converted text, same attributes) pairs
    """
    from_scheme = DEVANAGARI if to_scheme == IAST else IAST
    return [(transliterate(text, from_scheme, to_scheme), attrs) for text, attrs in runs]
