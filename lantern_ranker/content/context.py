"""Context windows around search terms in full OCR page text.

A full magazine page usually covers several unrelated items, so the
classifier can be pointed at the neighbourhood of the film's title rather
than the whole page. Matching tolerates OCR damage: broken spacing, stray
or missing quote marks, and multi-word titles whose distinctive words are
all that survived.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from lantern_ranker.content.config import ContentConfig
from lantern_ranker.content.schemas import ContextWindow

logger = logging.getLogger(__name__)

_QUOTE_CHARS = "\"'“”‘’"
_QUOTE_CLASS = "[\"'“”‘’]?"
_COMMON_WORDS = frozenset({"the", "of", "and", "in", "at"})
_QUOTED_PHRASE_RE = re.compile(r'"([^"]+)"')

# Characters searched for a word boundary at each window edge
_EDGE_SEARCH = 50
_PROXIMITY_GAP = 20


@dataclass
class _RawWindow:
    start: int
    end: int
    terms: list[str] = field(default_factory=list)


def search_terms(
    film_title: str | None = None,
    search_query: str | None = None,
    extra: Iterable[str] = (),
) -> list[str]:
    """
    Collect search terms for context windows.

    Uses the film title, every double-quoted phrase of the search query and
    any extra terms (e.g., a profile's text patterns). Duplicates and empty
    terms are dropped, first occurrence wins.
    """
    terms: list[str] = []
    if film_title:
        terms.append(film_title)
    if search_query:
        terms.extend(_QUOTED_PHRASE_RE.findall(search_query))
    terms.extend(extra)
    return [t for t in dict.fromkeys(t.strip() for t in terms) if t]


def _quote_flexible(word: str) -> str:
    return "".join(_QUOTE_CLASS if ch in _QUOTE_CHARS else re.escape(ch) for ch in word)


def term_patterns(term: str) -> list[re.Pattern[str]]:
    """
    Build OCR-tolerant patterns for one search term.

    1. Words joined by flexible whitespace.
    2. Same, with any quote mark optional and interchangeable.
    3. For terms of three or more words: the first two distinctive words
       (longer than four characters, not a common word) within 20 characters
       of each other.
    """
    words = term.split()
    if not words:
        return []

    patterns = [
        re.compile(r"\s+".join(re.escape(w) for w in words), re.IGNORECASE),
        re.compile(r"\s+".join(_quote_flexible(w) for w in words), re.IGNORECASE),
    ]

    if len(words) > 2:
        distinctive = [
            w for w in words if len(w) > 4 and w.lower() not in _COMMON_WORDS
        ]
        if len(distinctive) >= 2:
            patterns.append(
                re.compile(
                    f".{{0,{_PROXIMITY_GAP}}}".join(re.escape(w) for w in distinctive[:2]),
                    re.IGNORECASE,
                )
            )
    return patterns


class ContextWindowExtractor:
    """
    Extracts merged text windows around search-term occurrences.

    Usage:
        extractor = ContextWindowExtractor()
        windows = extractor.extract(page_text, ["The Wizard of Oz"])
    """

    def __init__(self, config: ContentConfig | None = None) -> None:
        self._config = config or ContentConfig()

    def extract(self, full_text: str, terms: Iterable[str]) -> list[ContextWindow]:
        """
        Find every occurrence of every term and return merged windows.

        Args:
            full_text: Full OCR text of a page.
            terms: Search terms.

        Returns:
            At most ``max_windows`` windows in text order.
        """
        if not full_text:
            return []

        size = self._config.window_size
        raw: dict[tuple[int, int], _RawWindow] = {}

        for term in terms:
            for pattern in term_patterns(term):
                for match in pattern.finditer(full_text):
                    start = max(0, match.start() - size)
                    end = min(len(full_text), match.end() + size)
                    window = raw.setdefault((start, end), _RawWindow(start, end))
                    if term not in window.terms:
                        window.terms.append(term)

        merged = self._merge(sorted(raw.values(), key=lambda w: (w.start, w.end)))
        logger.debug(
            "Found %d raw context windows, merged to %d", len(raw), len(merged)
        )

        return [
            ContextWindow(
                text=self._clean_boundaries(full_text, w.start, w.end),
                terms=w.terms,
                start=w.start,
                end=w.end,
            )
            for w in merged[: self._config.max_windows]
        ]

    def _merge(self, windows: list[_RawWindow]) -> list[_RawWindow]:
        """Merge windows that overlap or sit within merge_threshold of each other."""
        merged: list[_RawWindow] = []
        for window in windows:
            if merged and window.start <= merged[-1].end + self._config.merge_threshold:
                last = merged[-1]
                last.end = max(last.end, window.end)
                for term in window.terms:
                    if term not in last.terms:
                        last.terms.append(term)
            else:
                merged.append(_RawWindow(window.start, window.end, list(window.terms)))
        return merged

    @staticmethod
    def _clean_boundaries(full_text: str, start: int, end: int) -> str:
        """Trim cut edges back to word boundaries and mark them with ellipses."""
        text = full_text[start:end]
        cut_start = 0
        cut_end = len(text)

        if start > 0:
            first_space = text.find(" ")
            if 0 < first_space < _EDGE_SEARCH:
                cut_start = first_space + 1
        if end < len(full_text):
            last_space = text.rfind(" ")
            if last_space > len(text) - _EDGE_SEARCH:
                cut_end = last_space

        cleaned = text[cut_start:cut_end].strip()
        if start > 0:
            cleaned = "..." + cleaned
        if end < len(full_text):
            cleaned = cleaned + "..."
        return cleaned
