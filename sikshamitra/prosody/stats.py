"""Text statistics shown in the editor status bar."""

from sikshamitra.models import TextStats


def text_stats(text: str) -> TextStats:
    """
    Count characters, words and paragraphs.

    Args:
        text: Input text

    Returns:
        Codepoint count, whitespace-separated words and non-blank lines
    """
    return TextStats(
        characters=len(text),
        words=len(text.split()),
        paragraphs=sum(1 for line in text.split("\n") if line.strip()),
    )
