"""Tests for research profiles and ProfileLoader."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from lantern_ranker.config.settings import Settings
from lantern_ranker.profiles import (
    BUILTIN_PROFILES,
    ProfileError,
    ProfileLoader,
    ResearchProfile,
)
from lantern_ranker.publications import REGIONAL_PUBLICATION_PATTERNS
from lantern_ranker.scoring import CompositeScorer, ScoringConfig, SearchResult


@pytest.fixture
def loader(test_settings: Settings) -> ProfileLoader:
    """Loader over the built-in profiles only."""
    return ProfileLoader(test_settings)


def _write_profile(directory: Path, name: str, data: dict) -> Path:
    path = directory / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestBuiltinProfiles:
    """Built-in profile table."""

    def test_expected_keys(self) -> None:
        assert list(BUILTIN_PROFILES) == [
            "default",
            "early-cinema",
            "labor-history",
            "adaptation-studies",
            "early-adaptations",
            "regional-reception",
            "50s-adaptations",
        ]

    def test_regional_profiles_use_regional_patterns(self) -> None:
        for key in ("regional-reception", "50s-adaptations"):
            assert BUILTIN_PROFILES[key].publication_patterns == list(REGIONAL_PUBLICATION_PATTERNS)

    def test_other_profiles_inherit_base_patterns(self) -> None:
        assert BUILTIN_PROFILES["labor-history"].publication_patterns is None

    def test_labor_history_text_patterns(self) -> None:
        assert "picket line" in BUILTIN_PROFILES["labor-history"].text_patterns


class TestResearchProfile:
    """Profile validation."""

    def test_invalid_pattern(self) -> None:
        with pytest.raises(ValidationError, match="broken"):
            ResearchProfile(key="x", name="X", publication_patterns=[("broken", "(")])

    def test_trust_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            ResearchProfile(key="x", name="X", strategy_trust={"exact_title": 2.0})

    def test_negative_weight(self) -> None:
        with pytest.raises(ValidationError):
            ResearchProfile(key="x", name="X", publication_weights={"variety": -1})


class TestLoad:
    """Lookup and fallback."""

    def test_load_known(self, loader: ProfileLoader) -> None:
        assert loader.load("labor-history").name == "Film Industry Labor History"

    def test_unknown_falls_back_to_default(self, loader: ProfileLoader) -> None:
        assert loader.load("no-such-profile").key == "default"

    def test_none_uses_configured_default(self) -> None:
        loader = ProfileLoader(Settings(default_profile="early-cinema"))

        assert loader.load().key == "early-cinema"

    def test_list(self, loader: ProfileLoader) -> None:
        listing = loader.list()

        assert listing[0] == {
            "key": "default",
            "name": "Default",
            "description": BUILTIN_PROFILES["default"].description,
        }
        assert len(listing) == len(BUILTIN_PROFILES)

    def test_register_replaces(self, loader: ProfileLoader) -> None:
        loader.register(ResearchProfile(key="default", name="Custom default"))

        assert loader.load("default").name == "Custom default"


class TestLoadFile:
    """JSON profile files."""

    def test_load_file(self, loader: ProfileLoader, tmp_path: Path) -> None:
        path = _write_profile(
            tmp_path,
            "silent-comedy.json",
            {"name": "Silent Comedy", "publication_weights": {"motography": 2.0}},
        )

        profile = loader.load_file(path)

        assert profile.key == "silent-comedy"
        assert profile.publication_weights == {"motography": 2.0}

    def test_profile_suffix_stripped(self, loader: ProfileLoader, tmp_path: Path) -> None:
        path = _write_profile(tmp_path, "serials.profile.json", {"name": "Serials"})

        assert loader.load_file(path).key == "serials"

    def test_invalid_json(self, loader: ProfileLoader, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ProfileError):
            loader.load_file(path)

    def test_not_an_object(self, loader: ProfileLoader, tmp_path: Path) -> None:
        path = _write_profile(tmp_path, "list.json", [])  # type: ignore[arg-type]

        with pytest.raises(ProfileError, match="JSON object"):
            loader.load_file(path)

    def test_invalid_regex(self, loader: ProfileLoader, tmp_path: Path) -> None:
        path = _write_profile(
            tmp_path,
            "bad.json",
            {"name": "Bad", "publication_patterns": [["broken", "[unclosed"]]},
        )

        with pytest.raises(ProfileError, match="broken"):
            loader.load_file(path)

    def test_missing_file(self, loader: ProfileLoader, tmp_path: Path) -> None:
        with pytest.raises(ProfileError):
            loader.load_file(tmp_path / "missing.json")

    def test_profile_dir_registered(self, tmp_path: Path) -> None:
        _write_profile(tmp_path, "westerns.json", {"name": "Westerns"})

        loader = ProfileLoader(Settings(profile_dir=tmp_path))

        assert loader.load("westerns").name == "Westerns"

    def test_missing_profile_dir_skipped(self, tmp_path: Path) -> None:
        loader = ProfileLoader(Settings(profile_dir=tmp_path / "nope"))

        assert len(loader.list()) == len(BUILTIN_PROFILES)


class TestBuildScoringConfig:
    """Merging profiles over a base config."""

    def test_weights_merged(self, loader: ProfileLoader) -> None:
        config = loader.build_scoring_config("labor-history")

        assert config.publication_weights["american cinematographer"] == 1.8
        assert config.publication_weights["photoplay"] == 0.5
        # Untouched base entry
        assert config.publication_weights["silver screen"] == 1.0

    def test_trust_merged(self, loader: ProfileLoader) -> None:
        config = loader.build_scoring_config("labor-history")

        assert config.strategy_trust["title_strike"] == 0.90
        assert config.strategy_trust["exact_title"] == 0.95

    def test_patterns_replaced_when_declared(self, loader: ProfileLoader) -> None:
        config = loader.build_scoring_config("regional-reception")

        assert config.publication_patterns == list(REGIONAL_PUBLICATION_PATTERNS)

    def test_patterns_inherited(self, loader: ProfileLoader) -> None:
        base = ScoringConfig()

        config = loader.build_scoring_config("early-cinema", base=base)

        assert config.publication_patterns == base.publication_patterns

    def test_base_not_modified(self, loader: ProfileLoader) -> None:
        base = ScoringConfig(diversity_weight=0.4)

        config = loader.build_scoring_config("labor-history", base=base)

        assert config.diversity_weight == 0.4
        assert "american cinematographer" not in base.publication_weights

    def test_profile_changes_ranking(self, loader: ProfileLoader) -> None:
        results = [
            SearchResult(id="photoplay18chic", strategy="exact_title"),
            SearchResult(id="variety137-1940-01_0054", strategy="author_title"),
        ]

        default_ranked = CompositeScorer(loader.build_scoring_config("default")).score_all(results)
        labor_ranked = CompositeScorer(loader.build_scoring_config("labor-history")).score_all(results)

        assert default_ranked[0].id == "photoplay18chic"
        assert labor_ranked[0].id == "variety137-1940-01_0054"
