"""
Publication resolution for Lantern catalog identifiers.

Components:
- BASE_PUBLICATION_PATTERNS: Ordered (name, regex) table shared by most profiles
- DEFAULT_PUBLICATION_WEIGHTS: Credibility multipliers per publication
- PublicationResolver: First-match-wins identifier resolver
- compile_patterns: Compiles and validates an ordered pattern table
"""

from lantern_ranker.publications.patterns import (
    BASE_PUBLICATION_PATTERNS,
    REGIONAL_PUBLICATION_PATTERNS,
)
from lantern_ranker.publications.resolver import (
    UNKNOWN_PUBLICATION,
    PublicationResolver,
    compile_patterns,
)
from lantern_ranker.publications.weights import DEFAULT_PUBLICATION_WEIGHTS

__all__ = [
    "BASE_PUBLICATION_PATTERNS",
    "DEFAULT_PUBLICATION_WEIGHTS",
    "PublicationResolver",
    "REGIONAL_PUBLICATION_PATTERNS",
    "UNKNOWN_PUBLICATION",
    "compile_patterns",
]
