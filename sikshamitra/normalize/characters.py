"""IAST character classes used by the prosody scanners."""

from collections.abc import Iterable


class UnitTable:
    """
    Lookup table over one- and two-codepoint units.

    Matching is longest-first, so an aspirated consonant such as "kh" is never
    split into "k" + "h" and a diphthong such as "ai" is never read as "a".
    """

    def __init__(self, units: Iterable[str]) -> None:
        self._units = frozenset(units)
        self._widths = sorted({len(unit) for unit in self._units}, reverse=True)

    def __contains__(self, unit: object) -> bool:
        return unit in self._units

    def __iter__(self):
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def match(self, text: str, pos: int) -> str | None:
        """
        Return the longest unit starting at ``pos``, in lowercase.

        Capitals match their lowercase unit ("Kh" reads as "kh"). Only
        lowercasings that keep the codepoint count are accepted, so the
        width of the returned unit is always the width matched in ``text``.

        Args:
            text: Input text
            pos: Codepoint offset

        Returns:
            Matched unit, or None
        """
        for width in self._widths:
            candidate = text[pos : pos + width].lower()
            if len(candidate) == width and candidate in self._units:
                return candidate
        return None


# Nasals, semivowels and sibilants: never the placement site of an in-word holding
SKIP_CONSONANTS = frozenset({"ṅ", "ñ", "ṇ", "n", "m", "r", "ś", "ṣ", "s"})

ASPIRATED_CONSONANTS = ("kh", "gh", "ch", "jh", "ṭh", "ḍh", "th", "dh", "ph", "bh")

ALL_CONSONANTS = UnitTable(
    [
        "k", "kh", "g", "gh", "ṅ",
        "c", "ch", "j", "jh", "ñ",
        "ṭ", "ṭh", "ḍ", "ḍh", "ṇ",
        "t", "th", "d", "dh", "n",
        "p", "ph", "b", "bh", "m",
        "y", "r", "l", "v",
        "ś", "ṣ", "s", "h",
        "ḥ", "ṁ", "ṃ",
    ]
)

SHORT_VOWELS = frozenset({"a", "i", "u", "ṛ", "ḷ"})
LONG_VOWELS = frozenset({"ā", "ī", "ū", "ṝ", "ḹ", "e", "ai", "o", "au"})
VOWELS = UnitTable(SHORT_VOWELS | LONG_VOWELS)

# Anusvara and visarga make the preceding syllable vowel-bearing for holdings
ANUSVARA = frozenset({"ṁ", "ṃ"})
VOWEL_BEARING_MARKS = ANUSVARA | {"ḥ"}

# Canonical combining tone marks
SVARITA = "\u030d"  # Combining vertical line above
ANUDATTA = "\u0331"  # Combining macron below
UDATTA = "\u030e"  # Combining double vertical line above
TICK = "\u02ce"  # Modifier letter low grave accent

TONE_MARKS = frozenset({SVARITA, ANUDATTA, UDATTA, TICK})

# Legacy encodings folded by the normalizer; still transparent to scanning
VARIANT_TONE_MARKS = frozenset(
    {
        "\u0951",  # Devanagari stress sign udatta (used as svarita)
        "\u0952",  # Devanagari stress sign anudatta
        "\u0332",  # Combining low line
        "\u0320",  # Combining minus sign below
        "\u0321",  # Combining palatalized hook below
        "\u1cda",  # Vedic tone double svarita
        "\u0341",  # Combining acute tone mark
    }
)

PAUSE_GLYPH = "|"

OM = "oṁ"

# F9 + key shortcuts for typing IAST letters
IAST_SHORTCUTS: dict[str, str] = {
    "a": "ā", "i": "ī", "u": "ū", "r": "ṛ", "R": "ṝ",
    "l": "ḷ", "L": "ḹ", "m": "ṁ", "h": "ḥ",
    "t": "ṭ", "T": "ṭh", "d": "ḍ", "D": "ḍh", "n": "ṇ",
    "s": "ś", "S": "ṣ", "G": "ñ", "J": "ñ", "N": "ṅ",
}


def classify_consonant(text: str, pos: int) -> str | None:
    """
    Classify the consonant unit starting at a position.

    Args:
        text: Input text
        pos: Codepoint offset

    Returns:
        Consonant unit ("kh", "t", ...), or None
    """
    if pos < 0 or pos >= len(text):
        return None
    return ALL_CONSONANTS.match(text, pos)


def classify_vowel(text: str, pos: int) -> str | None:
    """
    Classify the vowel unit starting at a position.

    Args:
        text: Input text
        pos: Codepoint offset

    Returns:
        Vowel unit ("ai", "ā", ...), or None
    """
    if pos < 0 or pos >= len(text):
        return None
    return VOWELS.match(text, pos)


def vowel_ending_at(text: str, pos: int) -> str | None:
    """
    Classify the vowel unit whose last codepoint is at ``pos``.

    Used by backward scans: at the "i" of "ai" this returns the diphthong,
    not the short "i".
    """
    if pos < 0 or pos >= len(text):
        return None
    pair = text[pos - 1 : pos + 1].lower() if pos >= 1 else ""
    if len(pair) == 2 and pair in VOWELS:
        return pair
    return VOWELS.match(text[pos], 0)


def is_tone_mark(char: str) -> bool:
    """Check if a character is a combining tone mark."""
    return char in TONE_MARKS or char in VARIANT_TONE_MARKS


def is_pause_glyph(char: str) -> bool:
    return char == PAUSE_GLYPH


def is_transparent(char: str) -> bool:
    """Tone marks and the pause glyph are skipped by every scanner."""
    return is_tone_mark(char) or is_pause_glyph(char)


def iast_for_shortcut(key: str) -> str | None:
    """
    Look up the IAST letter typed with F9 followed by ``key``.

    Args:
        key: Key pressed after F9 (case-sensitive)

    Returns:
        IAST letter, or None for unmapped keys
    """
    return IAST_SHORTCUTS.get(key)
