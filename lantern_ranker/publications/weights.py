"""Default publication credibility weights.

Multipliers typically range 0.5-2.0; an unlisted publication gets the
neutral weight of 1.0 from ScoringConfig.
"""

DEFAULT_PUBLICATION_WEIGHTS: dict[str, float] = {
    # Trade papers
    "variety": 1.0,
    "motion picture world": 1.3,
    "motion picture herald": 1.0,
    "film daily": 1.0,
    "exhibitors herald": 1.0,
    "moving picture world": 1.3,
    # Fan magazines: different audience
    "photoplay": 1.2,
    "modern screen": 1.0,
    "silver screen": 1.0,
    "screenland": 0.9,
    # Specialized / rare
    "motography": 1.5,
    "fan scrapbook": 0.7,
}
