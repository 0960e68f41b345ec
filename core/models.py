"""
Data models for verse search, lookup and comparison.

This module defines the core data structures used throughout the system.
All of them are rebuilt for each user submission.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any, Tuple

import config


class Operator(str, Enum):
    """Boolean operator joining the terms of a search."""
    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class Verse:
    """A single verse returned by a table query."""
    source_label: str  # Book long name, or the Bible's description in comparisons
    chapter: int
    verse: int
    text: str

    def __post_init__(self):
        """Validate verse numbering."""
        if self.chapter < 1:
            raise ValueError(f"Chapter must be at least 1, got {self.chapter}")
        if self.verse < 1:
            raise ValueError(f"Verse must be at least 1, got {self.verse}")

    @property
    def reference(self) -> str:
        return f"{self.source_label} {self.chapter}:{self.verse}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "source_label": self.source_label,
            "chapter": self.chapter,
            "verse": self.verse,
            "text": self.text
        }


@dataclass(frozen=True)
class SearchTerm:
    """One search term; negated terms must NOT appear in the verse."""
    text: str
    negated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "negated": self.negated}


@dataclass(frozen=True)
class SearchPredicate:
    """Compiled search: an operator joining an ordered list of terms."""
    operator: Operator = Operator.AND
    terms: Tuple[SearchTerm, ...] = ()

    @property
    def is_empty(self) -> bool:
        """An empty predicate matches every verse."""
        return not self.terms

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "operator": self.operator.value,
            "terms": [term.to_dict() for term in self.terms]
        }


@dataclass(frozen=True)
class VerseRange:
    """A parsed reference such as 'Gen 6:1-7:2'."""
    collection_key: str  # Book short name, matched exactly
    start_chapter: int
    start_verse: int
    end_chapter: int
    end_verse: int

    @property
    def start_key(self) -> int:
        return self.start_chapter * config.VERSE_KEY_MULTIPLIER + self.start_verse

    @property
    def end_key(self) -> int:
        return self.end_chapter * config.VERSE_KEY_MULTIPLIER + self.end_verse

    @property
    def is_inverted(self) -> bool:
        """True when the range can never match (start after end)."""
        return self.start_key > self.end_key

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "collection_key": self.collection_key,
            "start_chapter": self.start_chapter,
            "start_verse": self.start_verse,
            "end_chapter": self.end_chapter,
            "end_verse": self.end_verse
        }


@dataclass(frozen=True)
class HighlightSpan:
    """A contiguous piece of verse text, tagged as matching or not."""
    substring: str
    is_match: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.substring, "match": self.is_match}


@dataclass
class SourceComparison:
    """Verses returned by one Bible source in a comparison."""
    source_label: str
    verses: List[Verse] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "source_label": self.source_label,
            "count": len(self.verses),
            "verses": [verse.to_dict() for verse in self.verses]
        }
