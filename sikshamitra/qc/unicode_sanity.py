"""Unicode sanity checks: characters the engine would pass through untouched."""

import logging
from collections import Counter
from dataclasses import dataclass

from sikshamitra.normalize.characters import ALL_CONSONANTS, VOWELS, is_transparent
from sikshamitra.normalize.transliteration import (
    BOUNDARY_PUNCTUATION,
    CONSONANTS,
    DIGITS,
    OM_LIGATURE,
    PUNCTUATION,
    VIRAMA,
    VOWEL_SIGNS,
)
from sikshamitra.normalize.transliteration import VOWELS as DEVANAGARI_VOWELS


def _known_characters() -> frozenset[str]:
    known: set[str] = set()
    for unit in [*ALL_CONSONANTS, *VOWELS]:
        known.update(unit)
        known.update(unit.upper())
    for table in (CONSONANTS, DEVANAGARI_VOWELS, VOWEL_SIGNS, PUNCTUATION, DIGITS):
        for glyph, latin in table.items():
            known.update(glyph)
            known.update(latin)
    known.update({VIRAMA, OM_LIGATURE, "'"})
    known.update(BOUNDARY_PUNCTUATION)
    return frozenset(known)


KNOWN_CHARACTERS = _known_characters()


@dataclass
class UnicodeSanityResult:
    """Result of Unicode sanity check."""

    total_characters: int
    unrecognized: Counter[str]
    examples: list[dict[str, str]]

    @property
    def clean(self) -> bool:
        return not self.unrecognized


def get_unrecognized_chars(text: str) -> set[str]:
    """
    Find characters outside the IAST and Devanagari tables.

    Whitespace, tone marks and the pause glyph count as recognized.

    Args:
        text: Input text

    Returns:
        Set of unrecognized characters
    """
    return {
        char
        for char in text
        if not (char.isspace() or is_transparent(char) or char in KNOWN_CHARACTERS)
    }


def check_text_unicode(
    text: str,
    logger: logging.Logger,
    max_examples: int = 10,
) -> UnicodeSanityResult:
    """
    Check a text line by line for unrecognized characters.

    Args:
        text: Input text
        logger: Logger instance
        max_examples: Maximum number of example lines to collect

    Returns:
        Unicode sanity check result
    """
    unrecognized: Counter[str] = Counter()
    examples: list[dict[str, str]] = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        chars = get_unrecognized_chars(line)
        if not chars:
            continue

        unrecognized.update(char for char in line if char in chars)
        if len(examples) < max_examples:
            examples.append(
                {
                    "line": str(line_number),
                    "text": line[:100],
                    "unrecognized": ", ".join(f"U+{ord(char):04X}" for char in sorted(chars)),
                }
            )

    logger.info(f"Found {sum(unrecognized.values())} unrecognized characters ({len(unrecognized)} distinct)")

    return UnicodeSanityResult(
        total_characters=len(text),
        unrecognized=unrecognized,
        examples=examples,
    )
