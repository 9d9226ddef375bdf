"""Configuration for the composite result scorer.

Provides Pydantic settings for the four component weights and the
publication and strategy tables the scorer reads. All settings can be
overridden via SCORING_* environment variables; table-valued settings take
JSON.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lantern_ranker.publications.patterns import BASE_PUBLICATION_PATTERNS
from lantern_ranker.publications.resolver import compile_patterns
from lantern_ranker.publications.weights import DEFAULT_PUBLICATION_WEIGHTS
from lantern_ranker.scoring.strategies import STRATEGY_TRUST


class ScoringConfig(BaseSettings):
    """Configuration for composite scoring of one film's search results.

    Settings can be overridden via environment variables prefixed with SCORING_.

    Example:
        SCORING_DIVERSITY_WEIGHT=0.4
        SCORING_PUBLICATION_WEIGHTS='{"variety": 1.5}'
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Component weights
    credibility_weight: float = Field(
        default=0.35,
        ge=0.0,
        description="Weight of source credibility in the composite score",
    )
    precision_weight: float = Field(
        default=0.25,
        ge=0.0,
        description="Weight of search-strategy precision",
    )
    diversity_weight: float = Field(
        default=0.25,
        ge=0.0,
        description="Weight of the diversity/novelty score",
    )
    relevance_weight: float = Field(
        default=0.15,
        ge=0.0,
        description="Weight of the engine-reported (position) relevance",
    )

    # Lookup tables
    publication_weights: dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_PUBLICATION_WEIGHTS),
        description="Credibility multiplier per publication name",
    )
    publication_patterns: list[tuple[str, str]] = Field(
        default_factory=lambda: list(BASE_PUBLICATION_PATTERNS),
        description="Ordered (publication, regex) pairs; first match wins",
    )
    strategy_trust: dict[str, float] = Field(
        default_factory=lambda: dict(STRATEGY_TRUST),
        description="Trust coefficient in [0, 1] per search strategy",
    )

    # Neutral defaults
    default_publication_weight: float = Field(
        default=1.0,
        ge=0.0,
        description="Weight for publications missing from publication_weights",
    )
    default_strategy_trust: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Trust for strategies missing from strategy_trust",
    )
    keyword_bonus: float = Field(
        default=5.0,
        ge=0.0,
        description="Precision bonus per extra search keyword (second, third)",
    )

    # Post-pass analysis
    duplicate_threshold: float = Field(
        default=20.0,
        ge=0.0,
        le=100.0,
        description="Diversity below this marks a result as a likely duplicate",
    )

    @field_validator("publication_patterns")
    @classmethod
    def _patterns_compile(cls, value: list[tuple[str, str]]) -> list[tuple[str, str]]:
        compile_patterns(value)
        return value

    @field_validator("strategy_trust")
    @classmethod
    def _trust_in_range(cls, value: dict[str, float]) -> dict[str, float]:
        for strategy, trust in value.items():
            if not 0.0 <= trust <= 1.0:
                raise ValueError(
                    f"Trust for strategy {strategy!r} must be in [0, 1], got {trust}"
                )
        return value

    @field_validator("publication_weights")
    @classmethod
    def _weights_non_negative(cls, value: dict[str, float]) -> dict[str, float]:
        for publication, weight in value.items():
            if weight < 0:
                raise ValueError(
                    f"Weight for publication {publication!r} must be >= 0, got {weight}"
                )
        return value

    @property
    def weights(self) -> dict[str, float]:
        """Component weights keyed by component name."""
        return {
            "credibility": self.credibility_weight,
            "precision": self.precision_weight,
            "diversity": self.diversity_weight,
            "relevance": self.relevance_weight,
        }
