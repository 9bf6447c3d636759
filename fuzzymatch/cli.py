"""
fuzzymatch - CLI Interface.

A command-line interface for ranking a list of titles against a partially
typed, possibly misspelled search term.

Usage Examples:
    # Print the titles matching a term, best first
    fuzzymatch search "candycane" titles.txt

    # Stricter threshold and a table of tiers and scores
    fuzzymatch search "BLU" titles.json --threshold 0.8 --verbose

    # Search with logging
    fuzzymatch search "pc" titles.txt --log-file search.log

    # Inspect the helpers behind the ranking
    fuzzymatch segment "pacific-cruiseShip"
    fuzzymatch distance kitten mutton
"""

import json
import time
from collections import Counter
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from fuzzymatch.matching import TitleMatcher, distance as edit_distance
from fuzzymatch.matching import initials, segment as segment_words, similarity
from fuzzymatch.models import ScoredMatch, SearchSummary
from fuzzymatch.reporting import SearchLogger
from fuzzymatch.ui import ResultsView

__version__ = "0.1.0"

# Initialize Typer app
app = typer.Typer(
    name="fuzzymatch",
    help="fuzzymatch - Rank titles against a search term.",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for consistent output formatting
console = Console()


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"fuzzymatch v{__version__}")
        raise typer.Exit()


def validate_threshold(value: float) -> float:
    """
    Validate threshold is within valid range.

    Raises:
        typer.BadParameter: If value is out of range.
    """
    if not 0.0 <= value <= 1.0:
        raise typer.BadParameter("Threshold must be between 0 and 1")
    return value


def load_titles(titles_path: Path) -> List[str]:
    """
    Load the titles to search from a file.

    A ``.json`` file must contain an array of strings. Any other file is read
    as plain text with one title per line; blank lines are skipped.

    Args:
        titles_path: File to read.

    Returns:
        Titles in file order.

    Raises:
        ValueError: If the file is missing or its content is not a list of
            titles.
    """
    if not titles_path.is_file():
        raise ValueError(f"Titles file does not exist: {titles_path}")

    content = titles_path.read_text(encoding="utf-8")

    if titles_path.suffix.lower() == ".json":
        try:
            titles = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {titles_path}: {e}")
        if not isinstance(titles, list) or not all(isinstance(t, str) for t in titles):
            raise ValueError(f"{titles_path} must contain a JSON array of strings")
        return titles

    return [line.strip() for line in content.splitlines() if line.strip()]


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """fuzzymatch - Rank titles against a search term."""
    pass


@app.command()
def search(
    query: str = typer.Argument(..., help="Search term to rank titles against."),
    titles_file: Path = typer.Argument(
        ...,
        help="File with one title per line, or a JSON array of titles.",
        exists=False,  # We do our own validation
    ),
    threshold: float = typer.Option(
        0.5,
        "--threshold",
        "-t",
        help="Minimum match score for a title to be shown (0-1).",
        callback=validate_threshold,
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Show at most this many titles.",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        "-l",
        help="Path for log file output.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Show tiers and scores in a results table.",
    ),
) -> None:
    """
    Print the titles matching a search term, best match first.

    Titles are ranked by match tier (exact, case-insensitive, initials,
    substring, fuzzy) and then by score. Titles scoring below the threshold
    are not shown.
    """
    try:
        titles = load_titles(titles_file)

        started = time.perf_counter()
        matcher = TitleMatcher(threshold=threshold)
        scored_matches = matcher.rank(titles, query)
        duration = time.perf_counter() - started

        # Summary counts every retained match; --limit only trims the listing
        summary = SearchSummary(
            query=query,
            threshold=matcher.threshold,
            total_candidates=len(titles),
            total_matches=len(scored_matches),
            tier_counts=dict(Counter(scored.tier for scored in scored_matches)),
            duration=duration,
        )
        shown = scored_matches if limit is None else scored_matches[:limit]

        view = ResultsView(console=console)
        if verbose:
            view.display_results(shown, summary)
        else:
            view.display_plain(shown)

        if log_file:
            _write_search_log(log_file, titles_file, shown, summary)

    except KeyboardInterrupt:
        console.print("\n[yellow]Search interrupted by user.[/yellow]")
        raise typer.Exit(130)

    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _write_search_log(
    log_file: Path,
    titles_file: Path,
    scored_matches: List[ScoredMatch],
    summary: SearchSummary,
) -> None:
    """Write the search log; a log that cannot be written only warns."""
    try:
        with SearchLogger(log_file) as logger:
            logger.log_header()
            logger.log_search(
                summary.query, summary.threshold, titles_file, summary.total_candidates
            )
            logger.log_results(scored_matches)
            logger.log_summary(summary)
    except OSError as e:
        console.print(
            f"[yellow]Warning:[/yellow] Failed to write log file: {e}. "
            "Continuing without logging."
        )
        return
    console.print(f"[dim]Log written to: {log_file}[/dim]")


@app.command()
def segment(
    text: str = typer.Argument(..., help="Text to split into words."),
) -> None:
    """Show the words and initials used for initials matching."""
    fragments = list(segment_words(text))
    if not fragments:
        console.print("[yellow]No words found.[/yellow]")
        return
    console.print(" | ".join(fragments), markup=False, highlight=False)
    console.print(f"Initials: {initials(text)}", markup=False, highlight=False)


@app.command()
def distance(
    first: str = typer.Argument(..., help="First string."),
    second: str = typer.Argument(..., help="Second string."),
) -> None:
    """Show the case-insensitive edit distance between two strings."""
    console.print(f"Distance: {edit_distance(first, second)}")
    console.print(f"Similarity: {similarity(first, second):.2f}")


if __name__ == "__main__":
    app()
