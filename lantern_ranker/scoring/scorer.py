"""Composite scoring and ranking of a film's search results.

Ranks results with a weighted additive model over four 0-100 components:
  final = credibility * w_c + precision * w_p + diversity * w_d + relevance * w_r

- credibility: publication weight * 50, capped at 100
- precision: strategy trust * 100 plus keyword bonuses, capped at 100
- diversity: decay/penalty score from the pass's DiversityTracker
- relevance: linear decay from 100 (first hit) to 20 (last hit)

Excerpts are short and OCR text is unreliable, so the model leans on
source and strategy signals rather than on excerpt content. Every data
problem degrades to a neutral default; the scorer never raises for input.

Components:
- CompositeScorer: Pure per-result scoring + per-film ranking pass
"""

from collections.abc import Iterable, Mapping, Sequence

import structlog

from lantern_ranker.observability.logging import bind_context, clear_context
from lantern_ranker.publications.resolver import UNKNOWN_PUBLICATION, PublicationResolver
from lantern_ranker.scoring.config import ScoringConfig
from lantern_ranker.scoring.diversity import DiversityTracker
from lantern_ranker.scoring.schemas import ScoringRecord, ScoringSummary, SearchResult

logger = structlog.get_logger(__name__)

UNKNOWN_STRATEGY = "unknown"

CREDIBILITY_SCALE = 50.0
MAX_COMPONENT = 100.0
RELEVANCE_FLOOR = 20.0
RELEVANCE_SPAN = 80.0


class CompositeScorer:
    """Scores and ranks one film's search results.

    The scorer only holds immutable configuration. Each ``score_all`` call
    creates its own DiversityTracker, so concurrent calls for different
    films never share state.

    Usage:
        scorer = CompositeScorer(ScoringConfig())
        ranked = scorer.score_all(results)
        ranked[0].scoring.final_score
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        resolver: PublicationResolver | None = None,
    ) -> None:
        self._config = config or ScoringConfig()
        self._resolver = resolver or PublicationResolver(self._config.publication_patterns)

    @property
    def config(self) -> ScoringConfig:
        return self._config

    # ── Components ───────────────────────────────────────

    def publication_for(self, result: SearchResult) -> str:
        """Pre-resolved publication if present, else resolve from the identifier."""
        return result.publication or self._resolver.resolve(result.id)

    def credibility(self, publication: str) -> float:
        """Source credibility; 50 for publications without a configured weight."""
        weight = self._config.publication_weights.get(
            publication, self._config.default_publication_weight
        )
        return min(MAX_COMPONENT, weight * CREDIBILITY_SCALE)

    def precision(self, result: SearchResult) -> float:
        """Search precision from strategy trust plus extra-keyword bonuses."""
        trust = self._config.strategy_trust.get(
            result.strategy or "", self._config.default_strategy_trust
        )
        bonus = 0.0
        if result.keywords is not None:
            bonus = result.keywords.extra_keyword_count * self._config.keyword_bonus
        return min(MAX_COMPONENT, trust * 100.0 + bonus)

    @staticmethod
    def relevance(index: int, total: int) -> float:
        """Position-based relevance, 100 for the first hit down to 20 for the last."""
        normalized = index / max(total - 1, 1)
        return max(RELEVANCE_FLOOR, MAX_COMPONENT - normalized * RELEVANCE_SPAN)

    # ── Scoring ──────────────────────────────────────────

    def score_result(
        self,
        result: SearchResult,
        index: int,
        total: int,
        tracker: DiversityTracker,
    ) -> ScoringRecord:
        """Score one result against the pass state, then record it in the tracker.

        The diversity component reads the tracker before this result is
        recorded, so a result never penalizes itself.

        Args:
            result: Result to score.
            index: 0-based position of the result in the input list.
            total: Length of the input list.
            tracker: Diversity state of the current pass.

        Returns:
            ScoringRecord without a rank.
        """
        publication = self.publication_for(result)
        strategy = result.strategy or UNKNOWN_STRATEGY

        components = {
            "credibility": self.credibility(publication),
            "precision": self.precision(result),
            "diversity": tracker.diversity_score(publication, strategy, result.excerpt),
            "relevance": self.relevance(index, total),
        }
        weights = self._config.weights
        breakdown = {name: value * weights[name] for name, value in components.items()}

        tracker.record(publication, strategy, result.excerpt)

        return ScoringRecord(
            publication=publication,
            final_score=sum(breakdown.values()),
            breakdown=breakdown,
            position=index + 1,
            **components,
        )

    def score_all(self, results: Sequence[SearchResult]) -> list[SearchResult]:
        """Score a film's results in list order, sort descending, assign ranks.

        Args:
            results: Results for one film in the order the engine returned them.

        Returns:
            Copies of the results carrying ScoringRecords, highest score first.
            Ties keep their input order.
        """
        if not results:
            return []

        tracker = DiversityTracker()
        total = len(results)

        scored: list[tuple[SearchResult, ScoringRecord]] = [
            (result, self.score_result(result, index, total, tracker))
            for index, result in enumerate(results)
        ]
        scored.sort(key=lambda pair: pair[1].final_score, reverse=True)

        ranked = [
            result.model_copy(
                update={
                    "publication": record.publication,
                    "scoring": record.model_copy(update={"rank": rank}),
                }
            )
            for rank, (result, record) in enumerate(scored, start=1)
        ]

        logger.debug(
            "Scored film results",
            results=total,
            publications=len(tracker.publications),
            strategies=len(tracker.strategies),
        )
        return ranked

    def score_films(
        self,
        films: Mapping[str, Sequence[SearchResult]],
    ) -> dict[str, list[SearchResult]]:
        """Score several films, each with its own diversity state.

        Args:
            films: film_id → that film's results in engine order.

        Returns:
            film_id → ranked results.
        """
        ranked: dict[str, list[SearchResult]] = {}
        for film_id, results in films.items():
            bind_context(film_id=film_id)
            try:
                ranked[film_id] = self.score_all(results)
                self.summarize(ranked[film_id])
            finally:
                clear_context()
        return ranked

    # ── Analysis ─────────────────────────────────────────

    def summarize(self, ranked: Iterable[SearchResult], top_n: int = 10) -> ScoringSummary:
        """Summarize the variety of a ranked list and log its top results.

        Args:
            ranked: Output of ``score_all``.
            top_n: Number of top results to inspect for variety.

        Returns:
            ScoringSummary for the list.
        """
        ranked = [r for r in ranked if r.scoring is not None]
        top = ranked[:top_n]

        top_publications = list(
            dict.fromkeys(r.scoring.publication for r in top)
        )
        top_strategies = list(
            dict.fromkeys(r.strategy or UNKNOWN_STRATEGY for r in top)
        )
        duplicates = sum(
            1 for r in ranked if r.scoring.diversity < self._config.duplicate_threshold
        )

        for result in ranked[:5]:
            s = result.scoring
            logger.info(
                "Top result",
                rank=s.rank,
                score=round(s.final_score, 1),
                publication=s.publication,
                strategy=result.strategy or UNKNOWN_STRATEGY,
                credibility=round(s.credibility),
                precision=round(s.precision),
                diversity=round(s.diversity),
                relevance=round(s.relevance),
            )

        if duplicates:
            logger.warning(
                "Potential duplicate or redundant results detected",
                count=duplicates,
            )

        summary = ScoringSummary(
            total=len(ranked),
            top_publications=top_publications,
            top_strategies=top_strategies,
            potential_duplicates=duplicates,
        )
        logger.info(
            "Top results diversity",
            top_n=len(top),
            publications=len(top_publications),
            strategies=len(top_strategies),
            unknown_publication=UNKNOWN_PUBLICATION in top_publications,
        )
        return summary
