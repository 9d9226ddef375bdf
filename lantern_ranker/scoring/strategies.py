"""Trust coefficients for search strategies.

A strategy is the query-construction technique that produced a hit. The
coefficient in [0, 1] expresses how far results of that strategy can be
trusted to actually be about the film; unknown strategies get 0.5.
"""

STRATEGY_TRUST: dict[str, float] = {
    # High precision
    "exact_title": 0.95,
    "author_title": 0.92,
    "novel_film_title": 0.90,
    "director_title": 0.88,
    "title_no_article": 0.85,
    # Medium precision
    "studio_title": 0.75,
    "title_box_office": 0.70,
    "title_production": 0.68,
    "title_exhibitor": 0.65,
    "star_title": 0.65,
    # Lower precision (more false positives)
    "abbreviated_title": 0.50,
    "author_only": 0.45,
    "director_only": 0.45,
    "keyword_film": 0.40,
    "possessive_title": 0.35,
    "partial_title": 0.30,
    # Labor-specific
    "title_strike": 0.80,
    "studio_labor": 0.70,
    "title_picket_line": 0.75,
}
