"""Research profile loading and scoring-config construction.

Profiles come from the built-in table and, optionally, from a directory of
JSON files named by ``Settings.profile_dir``. Every profile is validated on
load, so a bad regex or an out-of-range trust value fails when the profile
is read rather than halfway through a scoring pass.
"""

from __future__ import annotations

import json
from pathlib import Path

import structlog
from pydantic import ValidationError

from lantern_ranker.config.settings import Settings, get_settings
from lantern_ranker.profiles.data import BUILTIN_PROFILES, DEFAULT_PROFILE_KEY
from lantern_ranker.profiles.schemas import ResearchProfile
from lantern_ranker.scoring.config import ScoringConfig

logger = structlog.get_logger(__name__)


class ProfileError(ValueError):
    """Raised when a research profile cannot be read or fails validation."""


class ProfileLoader:
    """
    Registry of research profiles.

    Usage:
        loader = ProfileLoader()
        profile = loader.load("labor-history")
        config = loader.build_scoring_config(profile)
        scorer = CompositeScorer(config)
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._profiles: dict[str, ResearchProfile] = dict(BUILTIN_PROFILES)

        if self._settings.profile_dir is not None:
            self.load_directory(self._settings.profile_dir)

    def load(self, key: str | None = None) -> ResearchProfile:
        """
        Get a profile by key.

        Args:
            key: Profile key. Defaults to the configured default profile.

        Returns:
            The profile, or the default profile when the key is unknown.
        """
        key = key or self._settings.default_profile
        profile = self._profiles.get(key)
        if profile is not None:
            return profile

        logger.warning(
            "Unknown profile, using default",
            profile=key,
            available=sorted(self._profiles),
        )
        return self._profiles.get(self._settings.default_profile) or self._profiles[
            DEFAULT_PROFILE_KEY
        ]

    def list(self) -> list[dict[str, str]]:
        """Key, name and description of every registered profile."""
        return [profile.summary() for profile in self._profiles.values()]

    def register(self, profile: ResearchProfile) -> None:
        """Add a profile, replacing any registered profile with the same key."""
        if profile.key in self._profiles:
            logger.info("Replacing registered profile", profile=profile.key)
        self._profiles[profile.key] = profile

    def load_file(self, path: str | Path) -> ResearchProfile:
        """
        Read and validate a JSON profile file.

        The profile key defaults to the file name without its extension.

        Args:
            path: Path to the JSON file.

        Returns:
            Validated ResearchProfile (not registered).

        Raises:
            ProfileError: If the file cannot be read or is not a valid profile.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ProfileError(f"Cannot read profile {path}: {e}") from e

        if not isinstance(data, dict):
            raise ProfileError(f"Profile {path} must contain a JSON object")

        data.setdefault("key", path.stem.removesuffix(".profile"))
        data.setdefault("name", data["key"])
        try:
            return ResearchProfile.model_validate(data)
        except ValidationError as e:
            raise ProfileError(f"Invalid profile {path}: {e}") from e

    def load_directory(self, directory: str | Path) -> list[ResearchProfile]:
        """
        Register every ``*.json`` profile in a directory.

        Args:
            directory: Directory to scan. A missing directory is logged and skipped.

        Returns:
            Profiles registered, in file-name order.
        """
        directory = Path(directory)
        if not directory.is_dir():
            logger.warning("Profile directory not found", path=str(directory))
            return []

        loaded = []
        for path in sorted(directory.glob("*.json")):
            profile = self.load_file(path)
            self.register(profile)
            loaded.append(profile)

        logger.info("Loaded profiles from directory", path=str(directory), count=len(loaded))
        return loaded

    def build_scoring_config(
        self,
        profile: str | ResearchProfile | None = None,
        base: ScoringConfig | None = None,
    ) -> ScoringConfig:
        """
        Merge a profile over a base scoring config.

        Publication weights and strategy trust are merged key-wise with the
        profile winning; the pattern table is replaced only when the profile
        declares one.

        Args:
            profile: Profile or profile key. Defaults to the default profile.
            base: Config to merge onto. Defaults to ScoringConfig().

        Returns:
            New ScoringConfig; ``base`` is not modified.
        """
        if not isinstance(profile, ResearchProfile):
            profile = self.load(profile)
        base = base or ScoringConfig()

        update: dict = {
            "publication_weights": {**base.publication_weights, **profile.publication_weights},
            "strategy_trust": {**base.strategy_trust, **profile.strategy_trust},
        }
        if profile.publication_patterns is not None:
            update["publication_patterns"] = list(profile.publication_patterns)

        return base.model_copy(update=update)
