"""Base publication pattern table for Lantern item identifiers.

Each entry pairs a publication name with a regex tested against the
lowercased catalog identifier (e.g. ``variety137-1940-01_0054``). The table
is an ordered tuple: resolution is first-match-wins, so the most specific
patterns come first.

Several publications share identifier prefixes:
- ``motionpicture`` is used by Motion Picture Story Magazine, Motion Picture
  Classic, Motion Picture (fan magazine), Motion Picture Magazine and, when
  ``news`` is truncated, Motion Picture News.
- ``motion`` alone is used by Motion Play and by Motion Picture News when
  ``picture`` is truncated.

These prefixes produce false positives; check Lantern for the real metadata.
"""

from __future__ import annotations

PublicationPattern = tuple[str, str]

BASE_PUBLICATION_PATTERNS: tuple[PublicationPattern, ...] = (
    ("moving picture weekly", r"movingpicturewee|motionpicturewee"),
    # women's film reviews
    ("motion picture reviews", r"motionpicturerev"),
    ("the motion picture and the family", r"motionpicturefam"),
    ("motion picture daily", r"motionpicturedai"),
    ("motion picture herald", r"motionpictureher"),
    ("motion picture exhibitor", r"motionpictureexh"),
    ("motion picture story magazine", r"motionpicturesto"),
    ("motion picture magazine", r"motionpicturemag"),
    ("motion picture classic", r"motionpicturecla"),
    ("motion picture", r"motionpicture"),
    (
        "motion picture news",
        r"motionpicturenew|motionnew|motionpic(?!ture)|motionp(?!icture)"
        r"|motion(?!picture)|picturen",
    ),
    (
        "moving picture world",
        r"^(mpw\d|moving(?:picture)?wor|moving(?:\d|$)|movin(?:g)?(?:or|wor)"
        r"|movie?wor|mo(?:v)?(?:pic|wor)|more?wor|move?wor|movure)",
    ),
    ("the movies and the people who make them", r"moviespeoplewhom"),
    ("movie classic", r"movieclassic"),
    ("movieland", r"movielandtv"),
    ("picture play", r"pictureplay"),
    ("pictures and the picturegoer", r"\bpicture(?!n)"),
    ("exhibitors daily review", r"exhibitorsdailyr"),
    ("exhibitors herald", r"exhibher|exhibitorsh"),
    ("the exhibitor", r"\bexhibitor"),
    (
        "independent exhibitors film bulletin",
        r"independentexhibitorsfilm|filmbulletin|\bindepe",
    ),
    ("the philadelphia exhibitor", r"philadelphiaexhi"),
    (
        "exhibitors trade review",
        r"exhibitorstrade|exhibitorstra|exhibitorst(?!rade)"
        r"|\bexhibitors(?!daily|herald)|\bexhi(?!bitor|bher)|\bexh(?!ibitor|iber)",
    ),
    ("the film daily", r"filmdaily"),
    ("film mercury", r"filmmercury"),
    ("film fun", r"filmfun"),
    ("glamour of hollywood", r"glamourofhollywo"),
    ("hollywood filmograph", r"hollywoodfilmogr"),
    ("hollywood reporter", r"hollywoodreport"),
    ("hollywood spectator", r"hollywoodspectat"),
    ("hollywood", r"\bhollywood(?!spectat|report|filmgr)"),
    ("new movie magazine", r"newmoviemag"),
    ("new movies the national board of review magazine", r"newmoviesnation"),
    ("national board of review magazine", r"nationalboardofr"),
    ("american cinematographer", r"^america(?!nmotionpi)|amento|^amri"),
    ("national box office digest", r"boxofficedigest"),
    ("boxoffice barometer", r"boxofficebaromet"),
    ("boxoffice", r"boxoffice(?!digest|baromet|checkup)"),
    ("cinemundial", r"cinemundial"),
    ("camera", r"camera"),
    ("close up", r"closeup"),
    ("the new york clipper", r"clipper"),
    ("harrisons reports", r"harrisons"),
    ("illustrated films monthly", r"illustra"),
    ("modern screen", r"modernscreen"),
    ("motography", r"motography"),
    ("movie mirror", r"moviemirror"),
    ("photoplay", r"photoplay|photo|pho"),
    ("radio tv mirror", r"radiotvmirror|radiotvmi"),
    ("reel life", r"reellife"),
    ("the screen writer", r"screenwriter"),
    ("showmens trade review", r"showmen"),
    ("silver screen", r"silverscreen"),
    ("screenland", r"screenland"),
    ("talking screen", r"talkingscreen"),
    ("technicolor news and views", r"technewsviews"),
    ("variety", r"variety"),
    ("wids", r"wids"),
    ("the writers monthly", r"writersmonthly"),
    ("20th century fox dynamo", r"dynamo"),
    (
        "paramount press book",
        r"paramountpress|artcraftpress|paramountartcraf|paramountpressbo",
    ),
    ("universal weekly", r"universalweekly|universal"),
    ("mgm studio news", r"mgmstudionews"),
    ("whos who at metro-goldwyn-mayer", r"whoswhoatmetrogo"),
    ("mensajero paramount", r"mensajeroparamou"),
    ("paramount around the world", r"paramountinterna"),
    ("MPPC lawsuit", r"indistrictcourto"),
    ("british kinematograph", r"britishk"),
    ("canadian film weekly", r"canadianfilmweekly"),
)

# Shorter table used by the regional and 1950s profiles.
REGIONAL_PUBLICATION_PATTERNS: tuple[PublicationPattern, ...] = (
    ("new movie magazine", r"newmoviemag"),
    ("photoplay", r"photo(?!play)"),
    ("picture play", r"pictureplay"),
    ("motion picture world", r"motionpicture?wor|mopicwor"),
    ("moving picture world", r"movingpicture|movpict"),
    ("motion picture herald", r"motionpictureher"),
    ("variety", r"variety"),
    ("film daily", r"filmdaily"),
    ("exhibitors herald", r"exhibher|exhibitorsh"),
    ("modern screen", r"modernscreen"),
    ("motography", r"motography"),
    ("movie mirror", r"moviemirror"),
    ("silver screen", r"silverscreen"),
    ("screenland", r"screenland"),
    ("motion picture news", r"motionpicturenew"),
    ("fan scrapbook", r"fanscrapbook"),
    ("hollywood reporter", r"hollywoodreport"),
    ("box office", r"boxoffice"),
    ("independent", r"independ"),
    ("wids", r"wids"),
    ("paramount press", r"paramountpress|artcraftpress"),
    ("universal weekly", r"universalweekly"),
)
