"""Built-in research profiles."""

from lantern_ranker.profiles.schemas import ResearchProfile
from lantern_ranker.publications.patterns import REGIONAL_PUBLICATION_PATTERNS
from lantern_ranker.publications.weights import DEFAULT_PUBLICATION_WEIGHTS

DEFAULT_PROFILE_KEY = "default"


def _build_profiles() -> dict[str, ResearchProfile]:
    """
    Build the built-in profiles keyed by profile key.

    Returns:
        Profiles in listing order.
    """
    profiles = [
        ResearchProfile(
            key=DEFAULT_PROFILE_KEY,
            name="Default",
            description="Standard configuration for general film research",
            publication_weights=dict(DEFAULT_PUBLICATION_WEIGHTS),
        ),
        ResearchProfile(
            key="early-cinema",
            name="Early Cinema (1905-1920)",
            description="Focused on early film industry formation",
            publication_weights={
                "moving picture world": 1.5,
                "motography": 1.5,
                "motion picture news": 1.4,
                # Existed but less film-focused early
                "variety": 1.2,
                "photoplay": 1.2,
            },
        ),
        ResearchProfile(
            key="labor-history",
            name="Film Industry Labor History",
            description=(
                "Captures the labor environment and industrial relations "
                "during film production periods"
            ),
            publication_weights={
                # Covered strikes extensively
                "variety": 1.5,
                "the exhibitor": 1.4,
                "motion picture daily": 1.3,
                "hollywood reporter": 1.3,
                "the film daily": 1.2,
                "wids": 1.2,
                "motion picture herald": 1.3,
                "moving picture world": 1.2,
                # Craft perspective
                "american cinematographer": 1.8,
                "motography": 1.4,
                "harrisons reports": 1.6,
                "independent exhibitors film bulletin": 1.6,
                "showmens trade review": 1.4,
                "boxoffice": 1.3,
                # Fan magazines rarely discussed strikes
                "photoplay": 0.5,
                "modern screen": 0.4,
                "screenland": 0.4,
            },
            strategy_trust={
                "title_strike": 0.90,
                "title_work_stoppage": 0.85,
                "title_picket_line": 0.85,
                "title_walkout": 0.85,
                "studio_strike": 0.75,
                "studio_labor": 0.75,
                "studio_boycott": 0.65,
                "title_production": 0.70,
                "abbreviated_title": 0.30,
                "possessive_title": 0.20,
                "keyword_film": 0.20,
            },
            text_patterns=[
                "strike", "walkout", "picket line", "work stoppage",
                "labor dispute", "union", "guild", "picketing",
                "IATSE", "Screen Actors Guild", "SAG",
                "Writers Guild", "Directors Guild",
                "wages", "overtime", "hours", "conditions",
                "contract", "negotiation", "grievance",
                "production halted", "delayed by strike",
                "shut down", "suspended production",
            ],
            content_priorities=["strike", "wage_dispute", "union_activity", "production_delay"],
            notes=(
                "Captures the broader labor context during a film's production "
                "period rather than film-specific labor incidents. For specific "
                "strikes on individual films, targeted searches work better."
            ),
        ),
        ResearchProfile(
            key="adaptation-studies",
            name="Literary Adaptations",
            description="Emphasizes author attribution and source materials",
            publication_weights={
                "variety": 1.2,
                # Strong on early adaptations
                "motion picture world": 1.5,
                "moving picture world": 1.5,
                "motion picture herald": 1.3,
                "film daily": 1.2,
                "exhibitors herald": 1.3,
                # Often discussed literary sources
                "photoplay": 1.5,
                "modern screen": 1.3,
                "silver screen": 1.2,
                "screenland": 1.1,
                "motography": 1.4,
                "motion picture magazine": 1.4,
                "fan scrapbook": 0.6,
            },
            strategy_trust={
                "author_title": 0.95,
                "novel_film_title": 0.92,
                "source_adaptation": 0.85,
                "author_only": 0.60,
            },
            content_priorities=["review", "production_news", "interview"],
        ),
        ResearchProfile(
            key="early-adaptations",
            name="Early Literary Adaptations",
            description="Silent era adaptations with author emphasis",
            publication_weights={
                # Production announcements
                "moving picture world": 1.5,
                # Independent productions
                "motion picture news": 1.4,
                "exhibitors herald": 1.3,
                "motography": 1.3,
                "motion picture magazine": 1.4,
                "photoplay": 1.3,
                # Less film-focused early
                "variety": 1.1,
                "exhibitors trade review": 1.2,
                "the exhibitor": 1.2,
                "reel life": 1.1,
            },
            strategy_trust={
                "author_title": 0.95,
                # Authors were celebrities
                "author_only": 0.65,
                # Titles often abbreviated in the silent era
                "abbreviated_title": 0.65,
                "title_only": 0.55,
            },
            notes="Authors like Gene Stratton-Porter were major draws",
        ),
        ResearchProfile(
            key="regional-reception",
            name="Regional Literary Reception",
            description="How adaptations played outside major cities",
            publication_weights={
                # Kansas City
                "boxoffice": 1.8,
                # Philadelphia
                "the exhibitor": 1.6,
                "showmens trade review": 1.5,
                "exhibitors herald": 1.4,
                "motion picture herald": 1.0,
                # Small-town focus
                "harrisons reports": 1.5,
                # NYC/LA focus
                "variety": 0.8,
                "hollywood reporter": 0.7,
                "motion picture daily": 0.9,
            },
            publication_patterns=list(REGIONAL_PUBLICATION_PATTERNS),
            text_patterns=[
                "small town", "rural", "neighborhood",
                "played well in", "midwest", "south",
            ],
            content_priorities=["box_office", "review", "advertisement"],
        ),
        ResearchProfile(
            key="50s-adaptations",
            name="1950s Literary Adaptations",
            description="Widescreen era adaptations, regional focus",
            publication_weights={
                "motion picture herald": 1.3,
                "variety": 1.4,
                "hollywood reporter": 1.2,
                "film daily": 1.2,
                # Strongest regional voice
                "boxoffice": 1.6,
                "harrisons reports": 1.5,
                "motion picture daily": 1.2,
                "photoplay": 1.3,
                "modern screen": 1.2,
                "screenland": 1.1,
            },
            publication_patterns=list(REGIONAL_PUBLICATION_PATTERNS),
            notes="Fewer publications but remakes common",
        ),
    ]
    return {profile.key: profile for profile in profiles}


BUILTIN_PROFILES: dict[str, ResearchProfile] = _build_profiles()
