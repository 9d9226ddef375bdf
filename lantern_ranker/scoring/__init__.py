"""Composite scoring and ranking of a film's search results.

Combines source credibility, search-strategy precision, diversity and
engine-reported relevance into one weighted score per result.

Usage:
    from lantern_ranker.scoring import CompositeScorer, SearchResult

    scorer = CompositeScorer()
    ranked = scorer.score_all([SearchResult(id="variety137-1940-01_0054")])
"""

from lantern_ranker.scoring.config import ScoringConfig
from lantern_ranker.scoring.diversity import DiversityTracker, fingerprint
from lantern_ranker.scoring.schemas import (
    ScoringRecord,
    ScoringSummary,
    SearchKeywords,
    SearchResult,
)
from lantern_ranker.scoring.scorer import CompositeScorer
from lantern_ranker.scoring.strategies import STRATEGY_TRUST

__all__ = [
    "CompositeScorer",
    "DiversityTracker",
    "STRATEGY_TRUST",
    "ScoringConfig",
    "ScoringRecord",
    "ScoringSummary",
    "SearchKeywords",
    "SearchResult",
    "fingerprint",
]
