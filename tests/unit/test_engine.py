"""Tests for the engine entry points and annotation models."""

from sikshamitra import (
    AnnotatedText,
    Holding,
    Kind,
    Pause,
    annotate,
    find_all_holdings,
    find_all_pauses,
    normalize,
    to_alphasyllabic,
    to_latin_diacritic,
)


def test_entry_points():
    """Test the five host-facing operations."""
    assert normalize("saṃ") == "saṁ"
    assert to_latin_diacritic("राम") == "rāma"
    assert to_alphasyllabic("rāma") == "राम"
    assert find_all_holdings("satya") == [Holding(2, 1, Kind.SHORT)]
    assert find_all_pauses("rāmā iti") == [Pause(5, Kind.LONG)]


def test_annotate_offsets_refer_to_normalized_text():
    """Test annotation normalizes before locating spans."""
    result = annotate("ōṃ iti satya")

    assert result.text == "oṁ iti satya"
    assert result.pauses == [Pause(3, Kind.SHORT)]
    assert result.holdings == [Holding(9, 1, Kind.SHORT)]
    assert result.source is None


def test_annotated_text_to_dict():
    """Test JSON conversion."""
    document = AnnotatedText(
        text="rāmā iti",
        holdings=[],
        pauses=[Pause(5, Kind.LONG)],
        source="verse.txt",
    )

    assert document.to_dict() == {
        "source": "verse.txt",
        "text": "rāmā iti",
        "holdings": [],
        "pauses": [{"position": 5, "kind": "long"}],
    }


def test_holding_to_dict():
    """Test holding JSON conversion uses the kind's value."""
    assert Holding(1, 2, Kind.LONG).to_dict() == {"position": 1, "length": 2, "kind": "long"}


def test_kind_is_string():
    """Test kinds compare equal to their names."""
    assert Kind.SHORT == "short"
    assert Kind("long") is Kind.LONG
