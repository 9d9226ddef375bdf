"""Tests for ContentTypeClassifier."""

import re

import pytest

from lantern_ranker.content import (
    CONTENT_TYPE_FAMILIES,
    ContentConfig,
    ContentTypeClassifier,
    ContentTypeFamily,
    calculate_confidence,
    normalize_text,
)
from lantern_ranker.scoring import SearchResult

BOX_OFFICE_TEXT = "Box office gross $45,000 this week, a house record"


def _family(label: str, score: int, *patterns: str, min_length: int | None = None):
    """Build a small test family."""
    return ContentTypeFamily(
        key=label,
        label=label,
        score=score,
        min_length=min_length,
        patterns=tuple(re.compile(p, re.IGNORECASE) for p in patterns),
    )


class TestConfidence:
    """Confidence tiers from match counts."""

    @pytest.mark.parametrize(
        "count,total,expected",
        [
            (3, 20, "high"),
            (2, 4, "high"),
            (2, 12, "medium"),
            (1, 3, "medium"),
            (1, 10, "low"),
            (0, 0, "low"),
        ],
    )
    def test_tiers(self, count: int, total: int, expected: str) -> None:
        assert calculate_confidence(count, total) == expected


class TestBoxOffice:
    """Box office reports."""

    def test_gross_and_house_record(self, classifier: ContentTypeClassifier) -> None:
        analysis = classifier.analyze(BOX_OFFICE_TEXT)

        assert analysis.primary_type == "box_office"
        assert analysis.confidence in ("medium", "high")
        assert analysis.types[0].match_count == 2

    def test_only_box_office_matches(self, classifier: ContentTypeClassifier) -> None:
        analysis = classifier.analyze(BOX_OFFICE_TEXT)

        assert [t.type for t in analysis.types] == ["box_office"]
        assert analysis.word_count == 9

    def test_evidence(self, classifier: ContentTypeClassifier) -> None:
        analysis = classifier.analyze(BOX_OFFICE_TEXT, include_evidence=True)

        matches = [e.match for e in analysis.evidence]
        assert "gross $45,000" in matches
        assert "house record" in matches
        assert all(e.context for e in analysis.evidence)

    def test_no_evidence_by_default(self, classifier: ContentTypeClassifier) -> None:
        assert classifier.analyze(BOX_OFFICE_TEXT).evidence == []


class TestReview:
    """Reviews and the minimum length rule."""

    def test_review_detected(self, classifier: ContentTypeClassifier, review_text: str) -> None:
        analysis = classifier.analyze(review_text)

        assert analysis.primary_type == "review"
        assert analysis.confidence == "high"

    def test_short_text_skips_review(self, classifier: ContentTypeClassifier) -> None:
        analysis = classifier.analyze("Picture is excellent, worth booking.")

        assert "review" not in [t.type for t in analysis.types]

    def test_ocr_spacing_tolerated(self, classifier: ContentTypeClassifier, review_text: str) -> None:
        damaged = review_text.replace("should please audiences", "should   please\naudiences")
        analysis = classifier.analyze(damaged, include_evidence=True)

        assert any("should please audiences" in e.match for e in analysis.types[0].evidence)


class TestOrdering:
    """Types are ordered by confidence tier, then static score."""

    def test_confidence_beats_score(self) -> None:
        families = [
            _family("valuable", 10, r"alpha", r"zzz1", r"zzz2", r"zzz3", r"zzz4"),
            _family("common", 3, r"beta", r"gamma", r"delta"),
        ]
        classifier = ContentTypeClassifier(families=families)

        analysis = classifier.analyze("alpha beta gamma delta")

        assert [t.type for t in analysis.types] == ["common", "valuable"]
        assert analysis.types[0].confidence == "high"
        assert analysis.types[1].confidence == "low"

    def test_score_breaks_confidence_ties(self) -> None:
        families = [
            _family("low_value", 3, r"alpha", r"zzz1", r"zzz2", r"zzz3"),
            _family("high_value", 9, r"beta", r"zzz5", r"zzz6", r"zzz7"),
        ]
        classifier = ContentTypeClassifier(families=families)

        analysis = classifier.analyze("alpha beta")

        assert [t.type for t in analysis.types] == ["high_value", "low_value"]

    def test_total_score(self) -> None:
        families = [_family("a", 3, r"alpha"), _family("b", 5, r"beta")]
        analysis = ContentTypeClassifier(families=families).analyze("alpha beta")

        assert analysis.total_score == 8


class TestFallback:
    """Mention fallback and empty results."""

    def test_long_unmatched_text_is_mention(self, classifier: ContentTypeClassifier) -> None:
        text = " ".join(["lorem"] * 60)

        analysis = classifier.analyze(text)

        assert analysis.primary_type == "mention"
        assert analysis.confidence == "low"
        assert analysis.types[0].score == 1

    def test_short_unmatched_text_is_empty(self, classifier: ContentTypeClassifier) -> None:
        analysis = classifier.analyze("lorem ipsum dolor")

        assert analysis.types == []
        assert analysis.primary_type == ""
        assert analysis.confidence is None

    def test_mention_threshold_configurable(self) -> None:
        classifier = ContentTypeClassifier(ContentConfig(mention_min_words=3))

        assert classifier.analyze("lorem ipsum dolor").primary_type == "mention"

    @pytest.mark.parametrize("text", ["", "   \n "])
    def test_empty_text(self, classifier: ContentTypeClassifier, text: str) -> None:
        analysis = classifier.analyze(text)

        assert analysis.types == []
        assert analysis.word_count == 0


class TestHelpers:
    """Score lookup, listings and valuable-content checks."""

    def test_content_type_score(self, classifier: ContentTypeClassifier) -> None:
        assert classifier.content_type_score("review") == 10
        assert classifier.content_type_score("box_office") == 8
        assert classifier.content_type_score("mention") == 1
        assert classifier.content_type_score("nonsense") == 1

    def test_content_types_listing(self, classifier: ContentTypeClassifier) -> None:
        listing = classifier.content_types()

        assert [t["type"] for t in listing] == [f.label for f in CONTENT_TYPE_FAMILIES]
        assert all(t["pattern_count"] > 0 for t in listing)

    def test_has_valuable_content(self, classifier: ContentTypeClassifier) -> None:
        assert classifier.has_valuable_content(BOX_OFFICE_TEXT)
        assert not classifier.has_valuable_content(BOX_OFFICE_TEXT, threshold=9)
        assert not classifier.has_valuable_content(" ".join(["lorem"] * 60))

    def test_normalize_text(self) -> None:
        assert normalize_text("  a \n\t b  ") == "a b"


class TestAnnotate:
    """Attaching analysis to search results."""

    def test_annotates_copy(self, classifier: ContentTypeClassifier) -> None:
        result = SearchResult(id="variety1", excerpt=BOX_OFFICE_TEXT)

        annotated = classifier.annotate(result)

        assert annotated.content.primary_type == "box_office"
        assert result.content is None

    def test_full_text_overrides_excerpt(self, classifier: ContentTypeClassifier) -> None:
        result = SearchResult(id="variety1", excerpt="lorem")

        annotated = classifier.annotate(result, text=BOX_OFFICE_TEXT)

        assert annotated.content.primary_type == "box_office"

    def test_annotated_result_serializes(self, classifier: ContentTypeClassifier) -> None:
        annotated = classifier.annotate(SearchResult(id="variety1", excerpt=BOX_OFFICE_TEXT))

        dumped = annotated.model_dump(mode="json")

        assert dumped["content"]["primary_type"] == "box_office"

    def test_context_windows_with_search_terms(self, classifier: ContentTypeClassifier) -> None:
        analysis = classifier.analyze(BOX_OFFICE_TEXT, search_terms=["house record"])

        assert len(analysis.context_windows) == 1
        assert analysis.context_windows[0].terms == ["house record"]
