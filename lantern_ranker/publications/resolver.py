"""Publication resolution from Lantern item identifiers.

Compiles an ordered (name, pattern) table once and resolves identifiers
against it, first match wins. Resolution is pure: the resolver holds only
the compiled, immutable table.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from lantern_ranker.publications.patterns import BASE_PUBLICATION_PATTERNS

logger = logging.getLogger(__name__)

UNKNOWN_PUBLICATION = "unknown"


def compile_patterns(
    pairs: Iterable[tuple[str, str | re.Pattern[str]]],
) -> tuple[tuple[str, re.Pattern[str]], ...]:
    """
    Compile an ordered publication pattern table.

    Args:
        pairs: (publication name, regex source or compiled pattern) pairs.

    Returns:
        Tuple of (name, compiled pattern) in input order.

    Raises:
        ValueError: If a pattern is not a valid regular expression.
    """
    compiled: list[tuple[str, re.Pattern[str]]] = []
    for name, pattern in pairs:
        if isinstance(pattern, re.Pattern):
            compiled.append((name, pattern))
            continue
        try:
            compiled.append((name, re.compile(pattern, re.IGNORECASE)))
        except re.error as e:
            raise ValueError(
                f"Invalid pattern for publication {name!r}: {pattern!r} ({e})"
            ) from e
    return tuple(compiled)


class PublicationResolver:
    """
    Maps catalog identifiers to publication names.

    Usage:
        resolver = PublicationResolver()
        resolver.resolve("variety137-1940-01_0054")  # "variety"
    """

    def __init__(
        self,
        patterns: Sequence[tuple[str, str | re.Pattern[str]]] | None = None,
    ) -> None:
        self._patterns = compile_patterns(
            BASE_PUBLICATION_PATTERNS if patterns is None else patterns
        )

    @property
    def names(self) -> list[str]:
        """Publication names in resolution order."""
        return [name for name, _ in self._patterns]

    def resolve(self, identifier: str | None) -> str:
        """
        Resolve an identifier to a publication name.

        Args:
            identifier: Lantern item identifier.

        Returns:
            Name of the first matching publication, or "unknown".
        """
        if not identifier:
            return UNKNOWN_PUBLICATION

        lowered = identifier.lower()
        for name, pattern in self._patterns:
            if pattern.search(lowered):
                return name

        logger.debug("No publication pattern matched %s", identifier)
        return UNKNOWN_PUBLICATION
