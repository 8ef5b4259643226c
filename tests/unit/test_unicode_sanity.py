"""Tests for Unicode sanity checks."""

from sikshamitra.normalize.characters import ANUDATTA
from sikshamitra.qc.unicode_sanity import check_text_unicode, get_unrecognized_chars


def test_get_unrecognized_chars_clean():
    """Test IAST, Devanagari and tone marks are recognized."""
    assert get_unrecognized_chars("Rāma namaḥ | 123") == set()
    assert get_unrecognized_chars("ॐ नमः शिवाय ॥") == set()
    assert get_unrecognized_chars("a" + ANUDATTA + "gniṁ") == set()


def test_get_unrecognized_chars_foreign():
    """Test characters outside both scripts are reported."""
    assert get_unrecognized_chars("rāma x") == {"x"}
    assert get_unrecognized_chars("ⲁⲛⲟⲕ") == {"ⲁ", "ⲛ", "ⲟ", "ⲕ"}


def test_check_text_unicode(test_logger):
    """Test per-line reporting."""
    result = check_text_unicode("rāma\nrāma xx\nनमः", test_logger)

    assert not result.clean
    assert result.unrecognized["x"] == 2
    assert result.total_characters == 16
    assert len(result.examples) == 1
    assert result.examples[0]["line"] == "2"
    assert result.examples[0]["unrecognized"] == "U+0078"


def test_check_text_unicode_clean(test_logger):
    """Test clean text."""
    result = check_text_unicode("oṁ namaḥ śivāya", test_logger)

    assert result.clean
    assert result.examples == []


def test_check_text_unicode_max_examples(test_logger):
    """Test examples are capped."""
    result = check_text_unicode("\n".join(["x"] * 5), test_logger, max_examples=2)

    assert result.unrecognized["x"] == 5
    assert len(result.examples) == 2
