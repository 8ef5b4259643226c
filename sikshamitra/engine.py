"""Public entry points consumed by the editor host."""

from sikshamitra.models import AnnotatedText, Holding, Pause
from sikshamitra.normalize import tones, transliteration
from sikshamitra.prosody import holdings, pauses


def normalize(text: str) -> str:
    """Canonicalize tone marks and nasalization spellings (idempotent)."""
    return tones.normalize(text)


def to_latin_diacritic(text: str) -> str:
    """Devanagari to IAST."""
    return transliteration.to_latin_diacritic(text)


def to_alphasyllabic(text: str) -> str:
    """IAST to Devanagari."""
    return transliteration.to_alphasyllabic(text)


def find_all_holdings(text: str) -> list[Holding]:
    """Holdings for normalized IAST text, offsets into ``text``."""
    return holdings.find_all_holdings(text)


def find_all_pauses(text: str) -> list[Pause]:
    """Pauses for normalized IAST text, offsets into ``text``."""
    return pauses.find_all_pauses(text)


def annotate(text: str, source: str | None = None) -> AnnotatedText:
    """
    Normalize a text and locate its holdings and pauses.

    Span offsets refer to the normalized text carried in the result.

    Args:
        text: IAST text
        source: Optional label (e.g. a file name) carried into the result

    Returns:
        Annotated text
    """
    normalized = normalize(text)
    return AnnotatedText(
        text=normalized,
        holdings=find_all_holdings(normalized),
        pauses=find_all_pauses(normalized),
        source=source,
    )
