"""Data models for prosodic annotations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Kind(str, Enum):
    """Annotation length class."""

    SHORT = "short"
    LONG = "long"


@dataclass(frozen=True)
class Holding:
    """A consonant-cluster holding over ``length`` codepoints at ``position``."""

    position: int
    length: int
    kind: Kind

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "position": self.position,
            "length": self.length,
            "kind": self.kind.value,
        }


@dataclass(frozen=True)
class Pause:
    """A sandhi pause inserted before the codepoint at ``position``."""

    position: int
    kind: Kind

    @property
    def length(self) -> int:
        return 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "position": self.position,
            "kind": self.kind.value,
        }


@dataclass
class TextStats:
    """Editor status-bar counts."""

    characters: int = 0
    words: int = 0
    paragraphs: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "characters": self.characters,
            "words": self.words,
            "paragraphs": self.paragraphs,
        }


@dataclass
class AnnotatedText:
    """Normalized text with its holdings and pauses."""

    text: str
    holdings: list[Holding] = field(default_factory=list)
    pauses: list[Pause] = field(default_factory=list)
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "source": self.source,
            "text": self.text,
            "holdings": [holding.to_dict() for holding in self.holdings],
            "pauses": [pause.to_dict() for pause in self.pauses],
        }
