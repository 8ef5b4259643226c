"""Tests for annotation schema validation."""

from sikshamitra.engine import annotate
from sikshamitra.utils.schema import validate_annotation


def test_validate_annotation_valid(sample_iast_text, schema_dir):
    """Test validation of an engine-produced document."""
    data = annotate(sample_iast_text, source="sample.txt").to_dict()

    errors = validate_annotation(data, schema_dir)

    assert len(errors) == 0, f"Unexpected errors: {errors}"


def test_validate_annotation_missing_field(schema_dir):
    """Test validation of a document with missing required fields."""
    errors = validate_annotation({"text": "rāma"}, schema_dir)

    assert len(errors) > 0


def test_validate_annotation_bad_kind(schema_dir):
    """Test validation of a holding with an unknown kind."""
    data = {
        "text": "satya",
        "holdings": [{"position": 2, "length": 1, "kind": "medium"}],
        "pauses": [],
    }

    errors = validate_annotation(data, schema_dir)

    assert len(errors) == 1
    assert errors[0].startswith("holdings.0.kind")


def test_validate_annotation_bad_length(schema_dir):
    """Test holdings cover one or two codepoints."""
    data = {
        "text": "satya",
        "holdings": [{"position": 2, "length": 3, "kind": "short"}],
        "pauses": [],
    }

    assert validate_annotation(data, schema_dir)


def test_validate_annotation_extra_field(schema_dir):
    """Test pauses carry no length."""
    data = {
        "text": "rāmā iti",
        "holdings": [],
        "pauses": [{"position": 5, "length": 0, "kind": "long"}],
    }

    assert validate_annotation(data, schema_dir)
