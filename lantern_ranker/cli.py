"""
Command-line interface for lantern-ranker.

Scores saved Lantern search results, classifies trade-press text and lists
the available research profiles. JSON goes to stdout; logs go to stderr.

Usage:
    lantern-ranker score results.json --profile labor-history --top 10
    lantern-ranker analyze page.txt --evidence --term "The Wizard of Oz"
    lantern-ranker profiles
"""

import json
from pathlib import Path
from typing import Any

import click

from lantern_ranker.observability.logging import setup_logging


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Lantern Ranker - Scoring and classification of trade-press search results."""
    setup_logging(level="DEBUG" if debug else None)


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path} is not valid JSON: {e}") from e


def _write_json(data: Any, output: Path | None) -> None:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if output is None:
        click.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)


@main.command()
@click.argument(
    "results_json",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--profile", "profile_key", default=None, help="Research profile key")
@click.option(
    "--profile-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON research profile to use instead of a registered one",
)
@click.option("--top", type=click.IntRange(min=1), default=None, help="Keep only the top N results per film")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write JSON to this file instead of stdout",
)
def score(
    results_json: Path,
    profile_key: str | None,
    profile_file: Path | None,
    top: int | None,
    output: Path | None,
) -> None:
    """Score and rank search results.

    RESULTS_JSON holds either a list of raw Lantern hits for one film or an
    object mapping film ids to such lists.
    """
    from lantern_ranker.profiles import ProfileError, ProfileLoader
    from lantern_ranker.scoring import CompositeScorer, SearchResult

    try:
        loader = ProfileLoader()
        profile = loader.load_file(profile_file) if profile_file else loader.load(profile_key)
    except ProfileError as e:
        raise click.ClickException(str(e)) from e

    scorer = CompositeScorer(loader.build_scoring_config(profile))
    data = _read_json(results_json)

    def parse(hits: Any) -> list[SearchResult]:
        if not isinstance(hits, list) or not all(isinstance(h, dict) for h in hits):
            raise click.ClickException("Expected a list of search result objects")
        return [SearchResult.from_lantern(hit, position=i) for i, hit in enumerate(hits)]

    def dump(ranked: list[SearchResult]) -> list[dict[str, Any]]:
        return [r.model_dump(mode="json", exclude_none=True) for r in ranked[:top]]

    if isinstance(data, dict):
        films = {film_id: parse(hits) for film_id, hits in data.items()}
        ranked_films = scorer.score_films(films)
        _write_json({film_id: dump(r) for film_id, r in ranked_films.items()}, output)
    else:
        ranked = scorer.score_all(parse(data))
        scorer.summarize(ranked)
        _write_json(dump(ranked), output)


@main.command()
@click.argument(
    "text_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--evidence", is_flag=True, help="Include evidence snippets for each match")
@click.option("--term", "terms", multiple=True, help="Search term for context windows (repeatable)")
@click.option("--profile", "profile_key", default=None, help="Add the profile's text patterns as terms")
def analyze(
    text_file: Path,
    evidence: bool,
    terms: tuple[str, ...],
    profile_key: str | None,
) -> None:
    """Classify the content type of a text file."""
    from lantern_ranker.content import ContentTypeClassifier, search_terms
    from lantern_ranker.profiles import ProfileLoader

    text = text_file.read_text(encoding="utf-8")

    extra = list(terms)
    if profile_key:
        extra.extend(ProfileLoader().load(profile_key).text_patterns)

    classifier = ContentTypeClassifier()
    analysis = classifier.analyze(
        text,
        include_evidence=evidence,
        search_terms=search_terms(extra=extra) if extra else None,
    )
    _write_json(analysis.to_dict(), None)


@main.command()
def profiles() -> None:
    """List available research profiles."""
    from lantern_ranker.profiles import ProfileLoader

    click.echo("\nResearch Profiles:")
    click.echo("-" * 40)
    for summary in ProfileLoader().list():
        click.echo(click.style(f"  {summary['key']}", fg="cyan") + f": {summary['name']}")
        if summary["description"]:
            click.echo(f"      {summary['description']}")
    click.echo("-" * 40)


if __name__ == "__main__":
    main()
