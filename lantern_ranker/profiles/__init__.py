"""
Research profiles.

Components:
- ResearchProfile: Publication weights, pattern table and trust overrides
- BUILTIN_PROFILES: Profiles shipped with the package
- ProfileLoader: Registry with JSON loading and ScoringConfig construction
"""

from lantern_ranker.profiles.data import BUILTIN_PROFILES, DEFAULT_PROFILE_KEY
from lantern_ranker.profiles.loader import ProfileError, ProfileLoader
from lantern_ranker.profiles.schemas import ResearchProfile

__all__ = [
    "BUILTIN_PROFILES",
    "DEFAULT_PROFILE_KEY",
    "ProfileError",
    "ProfileLoader",
    "ResearchProfile",
]
