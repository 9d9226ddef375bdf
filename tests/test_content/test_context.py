"""Tests for context-window extraction around search terms."""

import pytest

from lantern_ranker.content import ContentConfig, ContextWindowExtractor, search_terms, term_patterns


def _filler(words: int) -> str:
    """Neutral filler text of the given word count."""
    return " ".join(["filler"] * words)


@pytest.fixture
def extractor() -> ContextWindowExtractor:
    """Extractor with small windows so tests stay readable."""
    return ContextWindowExtractor(ContentConfig(window_size=50, merge_threshold=20, max_windows=3))


class TestSearchTerms:
    """Collecting search terms."""

    def test_title_and_quoted_phrases(self) -> None:
        terms = search_terms("The Wizard of Oz", 'title:"Wizard of Oz" AND "Judy Garland"')

        assert terms == ["The Wizard of Oz", "Wizard of Oz", "Judy Garland"]

    def test_deduplicates_and_drops_empty(self) -> None:
        terms = search_terms("Oz", '"Oz"', extra=["strike", " ", "strike"])

        assert terms == ["Oz", "strike"]

    def test_no_inputs(self) -> None:
        assert search_terms() == []


class TestTermPatterns:
    """OCR-tolerant term patterns."""

    def test_flexible_whitespace(self) -> None:
        pattern = term_patterns("Wizard of Oz")[0]

        assert pattern.search("the WIZARD  of\nOz opened")

    def test_quote_flexible(self) -> None:
        pattern = term_patterns("Hell's Angels")[1]

        assert pattern.search("Hells Angels")
        assert pattern.search("Hell’s Angels")

    def test_proximity_pattern_for_long_titles(self) -> None:
        patterns = term_patterns("Mutiny on the Bounty")

        assert len(patterns) == 3
        assert not patterns[0].search("the Mutiny on teh Bounty")
        assert patterns[2].search("the Mutiny on teh Bounty")

    def test_no_proximity_for_short_titles(self) -> None:
        assert len(term_patterns("Wizard Oz")) == 2

    def test_no_proximity_without_distinctive_words(self) -> None:
        assert len(term_patterns("The Man of Aran")) == 2

    def test_empty_term(self) -> None:
        assert term_patterns("   ") == []


class TestExtract:
    """Window extraction, merging and trimming."""

    def test_empty_text(self, extractor: ContextWindowExtractor) -> None:
        assert extractor.extract("", ["Oz"]) == []

    def test_no_match(self, extractor: ContextWindowExtractor) -> None:
        assert extractor.extract(_filler(40), ["Oz"]) == []

    def test_whole_text_window_not_trimmed(self, extractor: ContextWindowExtractor) -> None:
        windows = extractor.extract("Wizard of Oz breaks records", ["Wizard of Oz"])

        assert len(windows) == 1
        assert windows[0].text == "Wizard of Oz breaks records"
        assert windows[0].start == 0

    def test_cut_edges_marked(self, extractor: ContextWindowExtractor) -> None:
        text = f"{_filler(30)} Wizard of Oz {_filler(30)}"

        windows = extractor.extract(text, ["Wizard of Oz"])

        assert len(windows) == 1
        assert windows[0].text.startswith("...")
        assert windows[0].text.endswith("...")
        assert "Wizard of Oz" in windows[0].text

    def test_nearby_hits_merged(self, extractor: ContextWindowExtractor) -> None:
        text = f"{_filler(30)} Oz strike {_filler(30)}"

        windows = extractor.extract(text, ["Oz", "strike"])

        assert len(windows) == 1
        assert windows[0].terms == ["Oz", "strike"]

    def test_distant_hits_kept_apart(self, extractor: ContextWindowExtractor) -> None:
        text = f"Oz {_filler(100)} strike"

        windows = extractor.extract(text, ["Oz", "strike"])

        assert [w.terms for w in windows] == [["Oz"], ["strike"]]
        assert windows[0].start < windows[1].start

    def test_max_windows(self, extractor: ContextWindowExtractor) -> None:
        text = f" {_filler(60)} ".join(["Oz"] * 6)

        windows = extractor.extract(text, ["Oz"])

        assert len(windows) == 3
