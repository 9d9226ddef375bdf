"""Research profile model.

A research profile tunes scoring to a research question: which
publications count as credible, how publication identifiers resolve, how
far each search strategy is trusted, and which extra text patterns mark
relevant passages in full text.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lantern_ranker.publications.resolver import compile_patterns


class ResearchProfile(BaseModel):
    """
    Scoring profile for one line of research.

    Attributes:
        key: Profile identifier (e.g., "labor-history").
        name: Human-readable name.
        description: One-line summary.
        publication_weights: Credibility multiplier per publication.
        publication_patterns: Ordered (publication, regex) pairs. None means
            the profile uses the base table.
        strategy_trust: Trust overrides in [0, 1], merged over the base table.
        text_patterns: Extra search terms for context-window extraction.
        content_priorities: Content types the research values most.
        notes: Free-form usage notes.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    name: str
    description: str = ""
    publication_weights: dict[str, float] = Field(default_factory=dict)
    publication_patterns: list[tuple[str, str]] | None = None
    strategy_trust: dict[str, float] = Field(default_factory=dict)
    text_patterns: list[str] = Field(default_factory=list)
    content_priorities: list[str] = Field(default_factory=list)
    notes: str = ""

    @field_validator("publication_patterns")
    @classmethod
    def _patterns_compile(
        cls, value: list[tuple[str, str]] | None
    ) -> list[tuple[str, str]] | None:
        if value is not None:
            compile_patterns(value)
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

    @field_validator("strategy_trust")
    @classmethod
    def _trust_in_range(cls, value: dict[str, float]) -> dict[str, float]:
        for strategy, trust in value.items():
            if not 0.0 <= trust <= 1.0:
                raise ValueError(
                    f"Trust for strategy {strategy!r} must be in [0, 1], got {trust}"
                )
        return value

    def summary(self) -> dict[str, str]:
        """Key, name and description for listings."""
        return {"key": self.key, "name": self.name, "description": self.description}
