"""Diversity tracking for a single film's scoring pass.

The tracker records how often each publication, strategy and
(publication, strategy) pair has been seen, plus a set of excerpt
fingerprints. A result's diversity score is read from the state left by
the results scored before it, so the score depends on traversal order.

One tracker belongs to exactly one scoring pass; the scorer creates a new
one per film and never shares it.
"""

import re
from collections import Counter
from dataclasses import dataclass, field

# Multiplicative decay per prior occurrence / penalty on repeat
PUBLICATION_DECAY = 0.7
STRATEGY_DECAY = 0.85
COMBINATION_PENALTY = 0.5
DUPLICATE_PENALTY = 0.2

MAX_DIVERSITY = 100.0
DIVERSITY_FLOOR = 10.0

FINGERPRINT_LENGTH = 50

_WHITESPACE_RE = re.compile(r"\s+")


def fingerprint(excerpt: str | None) -> str:
    """
    Near-duplicate key for an excerpt.

    Takes the first 50 characters, lowercases them and removes all
    whitespace. Shorter excerpts use the whole excerpt.

    Args:
        excerpt: Excerpt text, possibly empty.

    Returns:
        Fingerprint string, empty when the excerpt has no visible text.
    """
    if not excerpt:
        return ""
    return _WHITESPACE_RE.sub("", excerpt[:FINGERPRINT_LENGTH].lower())


@dataclass
class DiversityTracker:
    """
    Mutable per-film diversity state.

    Usage:
        tracker = DiversityTracker()
        score = tracker.diversity_score("variety", "exact_title", excerpt)
        tracker.record("variety", "exact_title", excerpt)
    """

    publications: Counter[str] = field(default_factory=Counter)
    strategies: Counter[str] = field(default_factory=Counter)
    combinations: Counter[tuple[str, str]] = field(default_factory=Counter)
    fingerprints: set[str] = field(default_factory=set)

    def diversity_score(self, publication: str, strategy: str, excerpt: str | None) -> float:
        """
        Score how much a result adds to the variety of the pass so far.

        Starts at 100 and applies, in sequence: 0.7 per prior occurrence of
        the publication, 0.85 per prior occurrence of the strategy, 0.5 when
        the pair was already seen and 0.2 when the excerpt fingerprint was
        already seen. Floored at 10.

        Does not modify the tracker.
        """
        score = MAX_DIVERSITY

        pub_count = self.publications[publication]
        if pub_count > 0:
            score *= PUBLICATION_DECAY**pub_count

        strategy_count = self.strategies[strategy]
        if strategy_count > 0:
            score *= STRATEGY_DECAY**strategy_count

        if self.combinations[(publication, strategy)] > 0:
            score *= COMBINATION_PENALTY

        key = fingerprint(excerpt)
        if key and key in self.fingerprints:
            score *= DUPLICATE_PENALTY

        return max(DIVERSITY_FLOOR, score)

    def record(self, publication: str, strategy: str, excerpt: str | None) -> None:
        """Count a scored result: publication, strategy, pair, then fingerprint."""
        self.publications[publication] += 1
        self.strategies[strategy] += 1
        self.combinations[(publication, strategy)] += 1

        key = fingerprint(excerpt)
        if key:
            self.fingerprints.add(key)

    @property
    def results_seen(self) -> int:
        """Number of results recorded so far."""
        return sum(self.publications.values())
