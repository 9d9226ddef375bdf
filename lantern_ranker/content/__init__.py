"""Content-type classification for trade-press text.

Regex families tuned to period trade-paper language classify an excerpt or
full page as a review, box office report, production still, interview and
so on, with a confidence tier and optional evidence snippets.
"""

from lantern_ranker.content.classifier import (
    ContentTypeClassifier,
    calculate_confidence,
    normalize_text,
)
from lantern_ranker.content.config import ContentConfig
from lantern_ranker.content.context import ContextWindowExtractor, search_terms, term_patterns
from lantern_ranker.content.patterns import CONTENT_TYPE_FAMILIES, MENTION_SCORE, ocr_phrase
from lantern_ranker.content.schemas import (
    CONFIDENCE_ORDER,
    MENTION_TYPE,
    ContentAnalysis,
    ContentTypeFamily,
    ContentTypeMatch,
    ContextWindow,
    Evidence,
)

__all__ = [
    "CONFIDENCE_ORDER",
    "CONTENT_TYPE_FAMILIES",
    "MENTION_SCORE",
    "MENTION_TYPE",
    "ContentAnalysis",
    "ContentConfig",
    "ContentTypeClassifier",
    "ContentTypeFamily",
    "ContentTypeMatch",
    "ContextWindow",
    "ContextWindowExtractor",
    "Evidence",
    "calculate_confidence",
    "normalize_text",
    "ocr_phrase",
    "search_terms",
    "term_patterns",
]
