"""Pytest fixtures for lantern-ranker tests."""

import pytest

from lantern_ranker.config.settings import Settings, get_settings
from lantern_ranker.content import ContentConfig, ContentTypeClassifier
from lantern_ranker.scoring import CompositeScorer, ScoringConfig


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Reset cached settings so environment changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(environment="development", log_level="DEBUG")


@pytest.fixture
def scoring_config() -> ScoringConfig:
    """Scoring config with default weights and tables."""
    return ScoringConfig()


@pytest.fixture
def scorer(scoring_config: ScoringConfig) -> CompositeScorer:
    """CompositeScorer with default config."""
    return CompositeScorer(scoring_config)


@pytest.fixture
def content_config() -> ContentConfig:
    """Content config with default thresholds."""
    return ContentConfig()


@pytest.fixture
def classifier(content_config: ContentConfig) -> ContentTypeClassifier:
    """ContentTypeClassifier with default families."""
    return ContentTypeClassifier(content_config)


@pytest.fixture
def review_text() -> str:
    """A period review long enough for the review family."""
    return (
        "THE WIZARD OF OZ. Metro-Goldwyn-Mayer. Cast: Judy Garland, Frank Morgan, "
        "Ray Bolger. Director: Victor Fleming. Running time: 101 minutes. "
        "The picture is excellent entertainment and should please audiences of "
        "every age. Photography excellent. Worth booking for any house; the "
        "entertainment value is beyond question."
    )
