"""Scoring, ranking and content-type classification for trade-press search results."""

__version__ = "0.1.0"
