"""Tests for application settings and content config."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from lantern_ranker.config import Settings, get_settings
from lantern_ranker.content import ContentConfig


class TestSettings:
    """Environment-based application settings."""

    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.default_profile == "default"
        assert settings.profile_dir is None

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("PROFILE_DIR", str(tmp_path))

        settings = Settings()

        assert settings.is_production
        assert settings.profile_dir == tmp_path

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_get_settings_cached(self) -> None:
        assert get_settings() is get_settings()


class TestContentConfig:
    """Classifier thresholds."""

    def test_defaults(self) -> None:
        config = ContentConfig()

        assert config.evidence_context_chars == 50
        assert config.mention_min_words == 50
        assert config.valuable_threshold == 5

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONTENT_MENTION_MIN_WORDS", "80")

        assert ContentConfig().mention_min_words == 80

    def test_window_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ContentConfig(window_size=10)
