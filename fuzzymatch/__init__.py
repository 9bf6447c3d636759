"""fuzzymatch - Search-as-you-type title matching.

A Python library for ranking a list of titles against a partially typed,
possibly misspelled query, using a tiered matching algorithm (exact,
case-insensitive, initials, substring and edit-distance matches).
"""

__version__ = "0.1.0"

from .errors import InvalidArgumentError
from .matching import (
    DEFAULT_THRESHOLD,
    Segments,
    TitleMatcher,
    distance,
    initials,
    match,
    segment,
    similarity,
)
from .models import (
    Candidate,
    MatchIndex,
    MatchTier,
    ScoredMatch,
    SearchSummary,
)

__all__ = [
    "__version__",
    "DEFAULT_THRESHOLD",
    "InvalidArgumentError",
    "Segments",
    "TitleMatcher",
    "distance",
    "initials",
    "match",
    "segment",
    "similarity",
    "Candidate",
    "MatchIndex",
    "MatchTier",
    "ScoredMatch",
    "SearchSummary",
]


def main() -> None:
    """Entry point for the fuzzymatch CLI application.

    Imports and runs the Typer app from the fuzzymatch.cli module.
    """
    from fuzzymatch.cli import app
    app()
