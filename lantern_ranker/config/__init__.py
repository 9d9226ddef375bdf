"""Application-wide settings."""

from lantern_ranker.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
