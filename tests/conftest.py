"""Pytest fixtures for śikṣāmitra tests."""

import logging
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def schema_dir():
    """Path to schemas directory."""
    return Path(__file__).parent.parent / "sikshamitra" / "data" / "schemas"


@pytest.fixture
def test_logger() -> logging.Logger:
    """Create a test logger."""
    logger = logging.getLogger("sikshamitra_test")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def settings_file(tmp_path, schema_dir):
    """Settings file without a log file, pointing at the repository schemas."""
    path = tmp_path / "settings.yaml"
    settings = {
        "logging": {"level": "WARNING", "format": "pretty"},
        "batch": {"max_workers": 2},
        "paths": {"schemas": str(schema_dir)},
    }
    path.write_text(yaml.safe_dump(settings), encoding="utf-8")
    return path


@pytest.fixture
def sample_iast_text():
    """Sample IAST verse with sandhi boundaries and clusters."""
    return "oṁ namaḥ śivāya\ntat tvam asi\nrāmā iti"


@pytest.fixture
def sample_devanagari_text():
    """Sample Devanagari text."""
    return "ॐ नमः शिवाय"


@pytest.fixture
def iast_corpus():
    """IAST words and phrases built from consonants, vowels and punctuation."""
    return [
        "rāma",
        "kṛṣṇa",
        "dharma",
        "vāk",
        "agniṁ",
        "oṁ namaḥ śivāya",
        "satyaṁ vada",
        "tat tvam asi",
        "bhagavadgītā",
        "jñānam",
        "śrīḥ",
        "khai",
        "pañca",
        "ṛṣiḥ",
        "so'ham",
        "vidyā ||",
        "rāmaḥ |",
        "123",
        "ātmā",
        "buddhi",
        "kḷpta",
        "ghṛtam",
        "aiśvarya",
        "auṣadham",
        "ṭhakkura",
        "ḍhaukate",
        "candram̐",
    ]
