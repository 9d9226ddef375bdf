"""Pattern families for historical trade-press content types.

Each family bundles regexes tuned to period trade-paper language (1910s-1950s)
for one genre: reviews, production stills, box office reports, interviews,
production news, exhibition advertisements, brief trade mentions and award
notices. Patterns run against whitespace-normalized OCR text.
"""

from __future__ import annotations

import re

from lantern_ranker.content.schemas import ContentTypeFamily


def ocr_phrase(phrase: str) -> str:
    """
    Build a pattern for a phrase that tolerates OCR spacing.

    Words are escaped and joined by ``\\s+`` so that broken or doubled
    spaces between words still match.
    """
    return r"\s+".join(re.escape(word) for word in phrase.split())


def _build_families() -> tuple[ContentTypeFamily, ...]:
    """
    Build and compile the content-type families.

    Returns:
        Families in evaluation order.
    """
    families: list[dict] = [
        {
            "key": "review",
            "label": "review",
            "score": 10,
            "min_length": 150,
            "patterns": [
                ocr_phrase("picture is excellent"),
                ocr_phrase("photoplay proves superb"),
                ocr_phrase("film is mediocre"),
                ocr_phrase("box office natural"),
                ocr_phrase("should please audiences"),
                ocr_phrase("will satisfy patrons"),
                ocr_phrase("worth booking"),
                ocr_phrase("entertainment value"),
                # Period review language
                r"\b(picture|photoplay|film)\s+(is|proves)\s+(excellent|superb|mediocre|disappointing)",
                r"\b(rates?|rating)\s+(high|low|fair|good|excellent)",
                r"\bbox[\s-]?office\s+(natural|wow|smash|dud)",
                r"\b(should|will)\s+(please|satisfy|disappoint)\s+(audiences|patrons|exhibitors)",
                r"\b(direction|acting|photography|story)\s+(excellent|good|fair|poor)",
                r"\bworth\s+(booking|playing|showing)",
                r"\b(entertainment|program)\s+value",
                r"\bexhibitor[s']?\s+(angle|slant|reports?)",
                r"\bpicture\s+is\s+(?:a\s+)?(?:good|excellent|poor)",
                r"\bstory\s+is\s+(?:well|poorly)\s+told",
                r"\bacting\s+is\s+(?:good|excellent|poor)",
                r"\bgood\s+picture",
                r"\bexcellent\s+film",
                r"\bpoor\s+photoplay",
                r"\bfine\s+production",
                # Review headers
                r"Cast[:\s].*Director[:\s]",
                r"Running time[:\s]\d+\s*minutes",
                r"\b(Class\s+[A-D]|Four\s+Stars?|Three\s+Bells)",
            ],
        },
        {
            "key": "production_photo",
            "label": "production_photo",
            "score": 9,
            "patterns": [
                ocr_phrase("scene from the photoplay"),
                ocr_phrase("scene from the picture"),
                ocr_phrase("exclusive photograph"),
                ocr_phrase("pictured above"),
                ocr_phrase("production still"),
                ocr_phrase("on the set"),
                # Photo captions
                r"\bscene\s+from",
                r"\b(?:above|below|here)\s*:?\s*(?:scene|view|shot)",
                r"\bexclusive\s+(photo|photograph|picture)",
                r"\bpictured\s+(above|here|below)",
                r"\b(production|working)\s+still",
                r"\bon\s+the\s+set\s+(of|with)",
                r"\bcamera\s+catches",
                r"\b(see|note)\s+(illustration|photo)",
                r"\bphoto(?:graph)?\b",
                r"\bscene\b.*\bfrom\b",
                # Layout references
                r"\b(top|bottom|left|right)\s+photo",
                # "cut" meant photo in trade papers
                r"\bcut\s+shows",
            ],
        },
        {
            "key": "box_office",
            "label": "box_office",
            "score": 8,
            "patterns": [
                r"\b(gross|grossed|grossing)\s*\$[\d,]+",
                r"\bbox[\s-]?office\s+(receipts?|returns?|take)",
                r"\b(b\.o\.|BO)\s*[:=]\s*\$?[\d,]+",
                r"\bweek[ly]?\s+(receipts?|gross|take)",
                r"\bhouse\s+record",
                r"\b(smash|wow|sock|boff|boffo)\s+(business|b\.o\.)",
                r"\b(capacity|near[\s-]capacity|SRO|turnaway)\s+business",
                r"\bholdover\s+(second|third|fourth)\s+week",
                r"\b(outgrossed|topped|beat)\s+previous",
                r"\bnice\s+business",
                # "clean-up" meant big profits
                r"\bclean[\s-]up",
                r"\bsocko\s+b\.o\.",
            ],
        },
        {
            "key": "interview",
            "label": "interview",
            "score": 7,
            "min_length": 100,
            "patterns": [
                # "says DeMille"
                r"\b(says|stated|declared|announced)\s+[A-Z][a-z]+",
                r"\b[A-Z][a-z]+\s+(reveals|discloses|tells)",
                r"\bquoted\s+as\s+saying",
                r"\bin\s+an?\s+(interview|chat|conversation)",
                r"\btalking\s+to\s+(your|our)\s+reporter",
                r"\b(director|producer|star)\s+[A-Z][a-z]+\s+(stated|said)",
                r"\bscribbled?\s+notes",
                r"\bover\s+luncheon",
            ],
        },
        {
            "key": "production_news",
            "label": "production_news",
            "score": 6,
            "patterns": [
                r"\b(began|started|commenced)\s+(production|filming|shooting)",
                r"\bgoes\s+before\s+cameras",
                r"\b(now|currently)\s+(shooting|filming|in\s+production)",
                r"\blensing\s+(at|on|in)",
                # "megaphoned by" = directed by
                r"\bmegaphone[rd]?\s+by",
                r"\bunder\s+(direction|supervision)\s+of",
                r"\bwrapped\s+production",
                r"\bon\s+location\s+(at|in)",
                r"\bcast\s+(set|completed|includes)",
                r"\bassigned\s+to\s+(direct|produce|write)",
                # Loan-outs between studios
                r"\bborrowed\s+from\s+[A-Z]",
                r"\bpacted\s+(for|to)",
            ],
        },
        {
            "key": "advertisement",
            "label": "advertisement",
            "score": 5,
            "patterns": [
                r"\b(now|here)\s+(showing|playing)",
                r"\bstarts\s+(today|tomorrow|friday|sunday)",
                r"\b(continuous|performances?)\s+(daily|from)",
                r"\b(matinee|matinees)\s+(daily|at)",
                r"\badmission\s*:?\s*\d+[¢c]",
                r"\b(popular|regular)\s+prices",
                r"\bspecial\s+midnight\s+show",
                r"\b(2|two|3|three)\s+(days|nights)\s+only",
                r"\bat\s+the\s+[A-Z][a-z]+\s+(Theatre|Theater|Playhouse)",
                r"\bdon't\s+miss",
                r"\bfunnier\s+than",
            ],
        },
        {
            "key": "trade_mention",
            "label": "trade_mention",
            "score": 3,
            "patterns": [
                r"\b(acquired|purchased|bought)\s+by\s+[A-Z]",
                r"\brights\s+(to|for|of)",
                r"\bset\s+for\s+release",
                r"\bscheduled\s+for",
                r"\bin\s+preparation",
                r"\bpre[\s-]?production",
                r"\bscript\s+(completed|approved)",
                r"\bsigned\s+(to|for|with)",
                r"\bdeals?\s+(set|closed|pending)",
            ],
        },
        {
            "key": "awards",
            "label": "awards",
            "score": 7,
            "patterns": [
                r"\b(Academy|Oscar)\s+(winner|nominee|nomination)",
                r"\bbest\s+(picture|actor|actress|director)",
                r"\baward[s]?\s+(winner|winning)",
                r"\b(won|nominated|competing)\s+for",
                r"\bPhotoplay\s+(Gold|Medal)",
                r"\bBox[\s-]?Office\s+Blue\s+Ribbon",
                r"\bFilm\s+Daily\s+Ten\s+Best",
            ],
        },
    ]

    return tuple(
        ContentTypeFamily(
            key=entry["key"],
            label=entry["label"],
            score=entry["score"],
            min_length=entry.get("min_length"),
            patterns=tuple(re.compile(p, re.IGNORECASE) for p in entry["patterns"]),
        )
        for entry in families
    )


CONTENT_TYPE_FAMILIES: tuple[ContentTypeFamily, ...] = _build_families()

# Static score of the fallback type for unmatched but substantial text
MENTION_SCORE = 1
