"""Holding placement on consonant clusters (samyukta)."""

from collections.abc import Iterable
from typing import TypeVar

from sikshamitra.models import Holding, Kind, Pause
from sikshamitra.normalize.characters import (
    LONG_VOWELS,
    SKIP_CONSONANTS,
    VOWEL_BEARING_MARKS,
    classify_consonant,
    is_transparent,
    vowel_ending_at,
)


S = TypeVar("S", Holding, Pause)


def find_samyukta_length(text: str, pos: int) -> int:
    """
    Count the consonant units of the cluster starting at a position.

    Whitespace, the pause glyph and tone marks are skipped, so a cluster can
    run across a word boundary. Any other character ends it.

    Args:
        text: Normalized IAST text
        pos: Offset of the first consonant

    Returns:
        Number of consonant units
    """
    return len(_Cluster(text, pos))


def find_previous_vowel(
    text: str,
    pos: int,
    block_at_space: bool = True,
) -> tuple[str | None, bool]:
    """
    Find the nearest vowel before a position.

    Anusvara and visarga count as vowel-bearing. The pause glyph and tone
    marks are skipped.

    Args:
        text: Normalized IAST text
        pos: Offset to look back from
        block_at_space: Stop at whitespace (word boundary)

    Returns:
        (vowel or None, whether the search stopped at a word boundary)
    """
    i = pos - 1

    while i >= 0:
        char = text[i]
        if is_transparent(char):
            i -= 1
            continue

        if char.isspace() and block_at_space:
            return None, True

        if char.lower() in VOWEL_BEARING_MARKS:
            return char.lower(), False

        vowel = vowel_ending_at(text, i)
        if vowel is not None:
            return vowel, False

        i -= 1

    return None, False


class _VowelLookbehind:
    """
    ``find_previous_vowel`` for increasing offsets in a single forward pass.

    Each codepoint is read once however many offsets are queried.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._state: tuple[str | None, bool] = (None, False)

    def at(self, pos: int) -> tuple[str | None, bool]:
        while self._pos < pos:
            char = self._text[self._pos]
            if is_transparent(char):
                pass
            elif char.isspace():
                self._state = (None, True)
            elif char.lower() in VOWEL_BEARING_MARKS:
                self._state = (char.lower(), False)
            else:
                vowel = vowel_ending_at(self._text, self._pos)
                if vowel is not None:
                    self._state = (vowel, False)
            self._pos += 1
        return self._state


class _Cluster:
    """
    Consonant units reachable from an offset, across whitespace and marks.

    Placement for the sub-cluster starting at any unit is answered from two
    tables built once, so a cluster costs time proportional to its length.
    """

    def __init__(self, text: str, pos: int) -> None:
        self.units: list[tuple[str, int]] = []
        after_space: list[bool] = []
        spaced = False
        i = pos

        while i < len(text):
            char = text[i]
            if char.isspace():
                spaced = True
                i += 1
                continue
            if is_transparent(char):
                i += 1
                continue

            unit = classify_consonant(text, i)
            if unit is None:
                break
            self.units.append((unit, i))
            after_space.append(spaced)
            spaced = False
            i += len(unit)

        last_unit, last_pos = self.units[-1] if self.units else ("", pos)
        self.end = last_pos + len(last_unit)

        # First unit of the next word, and first non-skip unit from here on
        self._next_word: list[int | None] = [None] * len(self.units)
        self._next_site: list[int | None] = [None] * len(self.units)
        next_word: int | None = None
        next_site: int | None = None
        for k in range(len(self.units) - 1, -1, -1):
            self._next_word[k] = next_word
            if after_space[k]:
                next_word = k
            if self.units[k][0] not in SKIP_CONSONANTS:
                next_site = k
            self._next_site[k] = next_site

    def __len__(self) -> int:
        return len(self.units)

    def place(self, k: int, kind: Kind) -> tuple[Holding | None, int]:
        """
        Place the holding for the sub-cluster starting at unit ``k``.

        Returns:
            (holding or None, index of the unit where scanning resumes)
        """
        crossing = self._next_word[k]
        if crossing is not None:
            unit, site = self.units[crossing]
            # Dvirvacana: a doubled consonant keeps the holding in the first word
            if self.units[crossing - 1][0] == unit:
                unit, site = self.units[crossing - 1]
            resume = self._next_word[crossing]
            return Holding(site, len(unit), kind), len(self.units) if resume is None else resume

        found = self._next_site[k]
        if found is None:
            return None, k + 1
        unit, site = self.units[found]
        return Holding(site, len(unit), kind), found + 1


def _kind_after(vowel: str) -> Kind:
    return Kind.LONG if vowel in LONG_VOWELS else Kind.SHORT


def find_holding(text: str, pos: int) -> Holding | None:
    """
    Find the holding for the consonant cluster starting at a position.

    Args:
        text: Normalized IAST text
        pos: Offset of a consonant

    Returns:
        Holding, or None when the cluster takes no holding
    """
    consonant = classify_consonant(text, pos)
    if consonant is None:
        return None

    cluster = _Cluster(text, pos)
    if len(cluster) <= 1:
        return None

    vowel, word_initial = find_previous_vowel(text, pos)
    if vowel is None:
        return Holding(pos, len(consonant), Kind.SHORT) if word_initial else None
    return cluster.place(0, _kind_after(vowel))[0]


def find_all_holdings(text: str) -> list[Holding]:
    """
    Find every holding in a text.

    Holdings are returned in discovery order. Positions index the exact
    string given; hosts that insert or remove text while applying them
    should use ``application_order``. Runs in time linear in the text.

    Args:
        text: Normalized IAST text

    Returns:
        List of holdings
    """
    holdings: list[Holding] = []
    lookbehind = _VowelLookbehind(text)
    i = 0

    while i < len(text):
        if classify_consonant(text, i) is None:
            i += 1
            continue

        cluster = _Cluster(text, i)
        k = 0
        while k < len(cluster) - 1:
            unit, pos = cluster.units[k]
            vowel, word_initial = lookbehind.at(pos)
            if vowel is None:
                if word_initial:
                    holdings.append(Holding(pos, len(unit), Kind.SHORT))
                k += 1
                continue

            holding, k = cluster.place(k, _kind_after(vowel))
            if holding is not None:
                holdings.append(holding)

        i = cluster.end

    return holdings


def application_order(spans: Iterable[S]) -> list[S]:
    """Order spans highest offset first so earlier edits keep later offsets valid."""
    return sorted(spans, key=lambda span: span.position, reverse=True)
