"""Configuration for the content-type classifier.

Uses Pydantic settings for environment-based configuration,
following the same pattern as the scoring config.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContentConfig(BaseSettings):
    """
    Configuration for content-type classification and context windows.

    All settings can be overridden via environment variables with CONTENT_ prefix.
    Example: CONTENT_MENTION_MIN_WORDS=80

    Attributes:
        evidence_context_chars: Characters captured on each side of a pattern hit.
        mention_min_words: Word count at which unmatched text becomes a mention.
        valuable_threshold: Static score a type needs for has_valuable_content.
        window_size: Characters taken on each side of a search-term hit.
        merge_threshold: Windows closer than this are merged.
        max_windows: Maximum context windows kept per text.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    evidence_context_chars: int = Field(
        default=50,
        ge=0,
        le=500,
        description="Characters captured on each side of a pattern match.",
    )
    mention_min_words: int = Field(
        default=50,
        ge=1,
        description="Unmatched text with at least this many words is a mention.",
    )
    valuable_threshold: int = Field(
        default=5,
        description="Minimum static score for a text to count as valuable content.",
    )
    window_size: int = Field(
        default=500,
        ge=50,
        le=5000,
        description="Characters before and after a search-term match.",
    )
    merge_threshold: int = Field(
        default=100,
        ge=0,
        description="Merge context windows whose gap is at most this many characters.",
    )
    max_windows: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Maximum context windows extracted per text.",
    )
