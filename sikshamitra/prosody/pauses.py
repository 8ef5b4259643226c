"""Sandhi pause placement at vowel-vowel word boundaries."""

from sikshamitra.models import Kind, Pause
from sikshamitra.normalize.characters import (
    ANUSVARA,
    LONG_VOWELS,
    SHORT_VOWELS,
    classify_vowel,
    is_tone_mark,
)


def _skip_tone_marks(text: str, pos: int) -> int:
    while pos < len(text) and is_tone_mark(text[pos]):
        pos += 1
    return pos


def _is_om(text: str, pos: int) -> bool:
    return text[pos : pos + 1].lower() == "o" and text[pos + 1 : pos + 2].lower() in ANUSVARA


def find_all_pauses(text: str) -> list[Pause]:
    """
    Find every pause in a text.

    Rules:
        1. "oṁ" followed by whitespace: short pause after the whitespace
        2. Long vowel, one space, short vowel: long pause before the second vowel
        3. Any other vowel, one space, vowel: short pause before the second vowel

    Args:
        text: Normalized IAST text

    Returns:
        List of zero-length pauses (insertion offsets)
    """
    pauses: list[Pause] = []
    i = 0
    n = len(text)

    while i < n:
        if is_tone_mark(text[i]):
            i += 1
            continue

        if _is_om(text, i) and i + 2 < n and text[i + 2].isspace():
            pauses.append(Pause(i + 3, Kind.SHORT))
            i += 3
            continue

        vowel = classify_vowel(text, i)
        if vowel is None:
            i += 1
            continue

        next_pos = _skip_tone_marks(text, i + len(vowel))
        if next_pos < n and text[next_pos].isspace():
            next_pos = _skip_tone_marks(text, next_pos + 1)
            next_vowel = classify_vowel(text, next_pos)
            if next_vowel is not None:
                if vowel in LONG_VOWELS and next_vowel in SHORT_VOWELS:
                    pauses.append(Pause(next_pos, Kind.LONG))
                else:
                    pauses.append(Pause(next_pos, Kind.SHORT))

        i += len(vowel)

    return pauses
