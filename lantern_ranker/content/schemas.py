"""Schema definitions for content-type classification.

Provides ContentTypeFamily for the static pattern configuration and the
ContentAnalysis dataclasses produced by the classifier.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Literal

ConfidenceTier = Literal["high", "medium", "low"]

CONFIDENCE_ORDER: dict[str, int] = {"high": 3, "medium": 2, "low": 1}

MENTION_TYPE = "mention"


@dataclass(frozen=True)
class ContentTypeFamily:
    """
    A named bundle of regular expressions for one genre of trade-press content.

    Attributes:
        key: Family identifier (e.g., "box_office").
        label: Content type emitted when the family matches.
        patterns: Compiled patterns, tested in order.
        score: Static importance of the content type (higher = more valuable).
        min_length: Normalized text shorter than this skips the family.
    """

    key: str
    label: str
    patterns: tuple[re.Pattern[str], ...]
    score: int
    min_length: int | None = None


@dataclass
class Evidence:
    """A single pattern hit with surrounding context for display."""

    pattern: str
    match: str
    context: str

    def to_dict(self) -> dict[str, Any]:
        return {"pattern": self.pattern, "match": self.match, "context": self.context}


@dataclass
class ContextWindow:
    """
    A slice of full text around occurrences of a search term.

    Attributes:
        text: Window text trimmed to word boundaries, with ellipses where cut.
        terms: Search terms found inside the window.
        start: Character offset of the untrimmed window start.
        end: Character offset of the untrimmed window end.
    """

    text: str
    terms: list[str]
    start: int
    end: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "terms": self.terms,
            "start": self.start,
            "end": self.end,
        }


@dataclass
class ContentTypeMatch:
    """
    One matched content-type family.

    Attributes:
        type: Content type label.
        score: Static importance score of the family.
        confidence: high / medium / low tier from match count and ratio.
        match_count: Number of the family's patterns that matched.
        evidence: Context snippets, filled only when evidence is requested.
    """

    type: str
    score: int
    confidence: ConfidenceTier
    match_count: int
    evidence: list[Evidence] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "score": self.score,
            "confidence": self.confidence,
            "match_count": self.match_count,
            "evidence": [e.to_dict() for e in self.evidence],
        }


@dataclass
class ContentAnalysis:
    """
    Classifier output for one text.

    ``types`` is sorted by confidence tier then static score. The primary
    type and confidence mirror the first entry; both stay empty when nothing
    matched and the text was too short for the mention fallback.
    """

    types: list[ContentTypeMatch] = field(default_factory=list)
    primary_type: str = ""
    confidence: ConfidenceTier | None = None
    evidence: list[Evidence] = field(default_factory=list)
    word_count: int = 0
    context_windows: list[ContextWindow] = field(default_factory=list)

    @property
    def total_score(self) -> int:
        """Sum of static scores over all matched types."""
        return sum(t.score for t in self.types)

    def to_dict(self) -> dict[str, Any]:
        """Convert analysis to dictionary for JSON serialization."""
        return {
            "types": [t.to_dict() for t in self.types],
            "primary_type": self.primary_type,
            "confidence": self.confidence,
            "evidence": [e.to_dict() for e in self.evidence],
            "word_count": self.word_count,
            "total_score": self.total_score,
            "context_windows": [w.to_dict() for w in self.context_windows],
        }
