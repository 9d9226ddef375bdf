"""Data models for search results and their scoring records.

SearchResult is the explicit shape of one Lantern search hit as it flows
from the catalog client through the scorer and classifier. Optional fields
map to documented defaults rather than failing at runtime.
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from lantern_ranker.content.schemas import ContentAnalysis


class SearchKeywords(BaseModel):
    """Keywords used to construct the query that produced a hit."""

    first_keyword: str | None = None
    second_keyword: str | None = None
    third_keyword: str | None = None

    @property
    def extra_keyword_count(self) -> int:
        """Number of keywords beyond the first (0-2)."""
        return sum(1 for k in (self.second_keyword, self.third_keyword) if k)


class ScoringRecord(BaseModel):
    """Composite score for one result within one film's scoring pass.

    Component scores are on a 0-100 scale. ``breakdown`` holds each
    component multiplied by its configured weight; ``final_score`` is the
    sum of the breakdown.
    """

    model_config = ConfigDict(frozen=True)

    publication: str = "unknown"
    credibility: float = Field(ge=0.0, le=100.0)
    precision: float = Field(ge=0.0, le=100.0)
    diversity: float = Field(ge=0.0, le=100.0)
    relevance: float = Field(ge=0.0, le=100.0)
    final_score: float = Field(ge=0.0)
    breakdown: dict[str, float] = Field(default_factory=dict)
    position: int = Field(ge=1, description="1-based position in the input list")
    rank: int | None = Field(default=None, ge=1, description="1-based rank after sorting")

    @property
    def components(self) -> dict[str, float]:
        """Unweighted component scores keyed by component name."""
        return {
            "credibility": self.credibility,
            "precision": self.precision,
            "diversity": self.diversity,
            "relevance": self.relevance,
        }


class SearchResult(BaseModel):
    """
    One search hit for a film.

    Attributes:
        id: Catalog item identifier, unique within the catalog.
        excerpt: OCR-derived snippet returned by the search engine.
        strategy: Search strategy that produced the hit.
        keywords: Keywords used to build the query, if known.
        publication: Publication name when already resolved upstream.
        position: Index in the unsorted list the hit arrived in.
        scoring: Record attached by the scorer.
        content: Content-type analysis attached by the classifier.
    """

    id: str
    excerpt: str = ""
    strategy: str | None = None
    keywords: SearchKeywords | None = None
    publication: str | None = None
    position: int = Field(default=0, ge=0)
    scoring: ScoringRecord | None = None
    content: ContentAnalysis | None = None

    @classmethod
    def from_lantern(cls, data: dict[str, Any], position: int = 0) -> "SearchResult":
        """
        Create a SearchResult from a raw Lantern API hit.

        The raw hit nests the excerpt under ``attributes.body.attributes.value``
        and names the strategy ``foundBy``; every nested level may be absent.

        Args:
            data: Raw hit as returned by the catalog client.
            position: Index of the hit in the list it arrived in.

        Returns:
            SearchResult instance.
        """
        body = (data.get("attributes") or {}).get("body") or {}
        excerpt = (body.get("attributes") or {}).get("value") or ""
        keywords = data.get("keywords")
        prior_scoring = data.get("scoring") or {}

        return cls(
            id=str(data.get("id", "")),
            excerpt=excerpt,
            strategy=data.get("foundBy") or data.get("strategy"),
            keywords=SearchKeywords(**keywords) if isinstance(keywords, dict) else None,
            publication=prior_scoring.get("publication") or data.get("publication"),
            position=position,
        )


@dataclass
class ScoringSummary:
    """
    Post-pass analysis of one film's ranked results.

    Attributes:
        total: Number of scored results.
        top_publications: Distinct publications among the top results, in rank order.
        top_strategies: Distinct strategies among the top results, in rank order.
        potential_duplicates: Results whose diversity fell below the duplicate threshold.
    """

    total: int
    top_publications: list[str] = field(default_factory=list)
    top_strategies: list[str] = field(default_factory=list)
    potential_duplicates: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "top_publications": self.top_publications,
            "top_strategies": self.top_strategies,
            "potential_duplicates": self.potential_duplicates,
        }
