"""Content-type classification for trade-press text.

Scores text against the pattern families and ranks the matched types by
confidence tier, then by static importance. Confidence comes from how many
of a family's patterns matched, absolutely and relative to the family size:

  high   - 3+ patterns, or at least half of the family
  medium - 2 patterns, or at least 30% of the family
  low    - otherwise

The classifier is a pure function of the text and the static families; it
keeps no state between calls.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from lantern_ranker.content.config import ContentConfig
from lantern_ranker.content.context import ContextWindowExtractor
from lantern_ranker.content.patterns import CONTENT_TYPE_FAMILIES, MENTION_SCORE
from lantern_ranker.content.schemas import (
    CONFIDENCE_ORDER,
    MENTION_TYPE,
    ConfidenceTier,
    ContentAnalysis,
    ContentTypeFamily,
    ContentTypeMatch,
    Evidence,
)

if TYPE_CHECKING:
    from lantern_ranker.scoring.schemas import SearchResult

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def calculate_confidence(match_count: int, total_patterns: int) -> ConfidenceTier:
    """
    Derive a confidence tier from a family's match count.

    Args:
        match_count: Number of the family's patterns that matched.
        total_patterns: Number of patterns in the family.

    Returns:
        "high", "medium" or "low".
    """
    ratio = match_count / total_patterns if total_patterns else 0.0
    if match_count >= 3 or ratio >= 0.5:
        return "high"
    if match_count >= 2 or ratio >= 0.3:
        return "medium"
    return "low"


class ContentTypeClassifier:
    """
    Regex-based content-type classifier for OCR trade-press text.

    Usage:
        classifier = ContentTypeClassifier()
        analysis = classifier.analyze(page_text, include_evidence=True)
        analysis.primary_type  # e.g. "box_office"
    """

    def __init__(
        self,
        config: ContentConfig | None = None,
        families: Sequence[ContentTypeFamily] | None = None,
        extractor: ContextWindowExtractor | None = None,
    ) -> None:
        self._config = config or ContentConfig()
        self._families = tuple(CONTENT_TYPE_FAMILIES if families is None else families)
        self._extractor = extractor or ContextWindowExtractor(self._config)

    @property
    def families(self) -> tuple[ContentTypeFamily, ...]:
        return self._families

    def analyze(
        self,
        text: str,
        include_evidence: bool = False,
        search_terms: Iterable[str] | None = None,
    ) -> ContentAnalysis:
        """
        Classify a text.

        Args:
            text: Excerpt or full page text.
            include_evidence: Capture context snippets around each pattern hit.
            search_terms: When given, context windows around these terms are
                attached to the analysis.

        Returns:
            ContentAnalysis with types sorted by confidence then score.
        """
        normalized = normalize_text(text or "")
        word_count = len(normalized.split())

        types = [
            match
            for family in self._families
            if (match := self._match_family(family, normalized, include_evidence))
        ]
        types.sort(key=lambda t: (CONFIDENCE_ORDER[t.confidence], t.score), reverse=True)

        if not types and word_count >= self._config.mention_min_words:
            types.append(
                ContentTypeMatch(
                    type=MENTION_TYPE,
                    score=MENTION_SCORE,
                    confidence="low",
                    match_count=0,
                )
            )

        analysis = ContentAnalysis(types=types, word_count=word_count)
        if types:
            analysis.primary_type = types[0].type
            analysis.confidence = types[0].confidence
            analysis.evidence = list(types[0].evidence)

        if search_terms is not None:
            analysis.context_windows = self._extractor.extract(text or "", search_terms)

        logger.debug(
            "Classified text: %d words, primary=%s, %d types",
            word_count,
            analysis.primary_type or "-",
            len(types),
        )
        return analysis

    def _match_family(
        self,
        family: ContentTypeFamily,
        normalized: str,
        include_evidence: bool,
    ) -> ContentTypeMatch | None:
        """Test every pattern of one family; None when the family is skipped or unmatched."""
        if family.min_length and len(normalized) < family.min_length:
            return None

        match_count = 0
        evidence: list[Evidence] = []
        window = self._config.evidence_context_chars

        for pattern in family.patterns:
            match = pattern.search(normalized)
            if match is None:
                continue
            match_count += 1
            if include_evidence:
                lo = max(0, match.start() - window)
                hi = min(len(normalized), match.end() + window)
                evidence.append(
                    Evidence(
                        pattern=pattern.pattern,
                        match=match.group(0),
                        context=normalized[lo:hi],
                    )
                )

        if match_count == 0:
            return None

        return ContentTypeMatch(
            type=family.label,
            score=family.score,
            confidence=calculate_confidence(match_count, len(family.patterns)),
            match_count=match_count,
            evidence=evidence,
        )

    def annotate(
        self,
        result: SearchResult,
        text: str | None = None,
        include_evidence: bool = False,
        search_terms: Iterable[str] | None = None,
    ) -> SearchResult:
        """
        Return a copy of a search result with its content analysis attached.

        Args:
            result: Result to annotate; not modified.
            text: Full text to classify. Defaults to the result's excerpt.
            include_evidence: Capture evidence snippets.
            search_terms: Terms for context windows.
        """
        analysis = self.analyze(
            result.excerpt if text is None else text,
            include_evidence=include_evidence,
            search_terms=search_terms,
        )
        return result.model_copy(update={"content": analysis})

    def content_type_score(self, content_type: str) -> int:
        """Static score of a content type label; 1 for unknown labels."""
        for family in self._families:
            if family.label == content_type:
                return family.score
        return MENTION_SCORE

    def content_types(self) -> list[dict[str, int | str]]:
        """Type label, static score and pattern count per family."""
        return [
            {
                "type": family.label,
                "score": family.score,
                "pattern_count": len(family.patterns),
            }
            for family in self._families
        ]

    def has_valuable_content(self, text: str, threshold: int | None = None) -> bool:
        """Whether any matched type reaches the static-score threshold."""
        if threshold is None:
            threshold = self._config.valuable_threshold
        analysis = self.analyze(text)
        return any(
            t.score >= threshold for t in analysis.types if t.type != MENTION_TYPE
        )
