"""Pytest fixtures for fuzzymatch tests."""

import io
import json
import tempfile
from pathlib import Path
from typing import Generator, List

import pytest
from rich.console import Console

from fuzzymatch.matching import TitleMatcher
from fuzzymatch.models import Candidate, MatchTier, ScoredMatch, SearchSummary


def pytest_configure(config: pytest.Config) -> None:
    """Register the custom markers used across the suite."""
    config.addinivalue_line("markers", "unit: fast tests of a single component")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def matcher() -> TitleMatcher:
    """Return a TitleMatcher with the default threshold (0.7)."""
    return TitleMatcher()


@pytest.fixture
def sample_titles() -> List[str]:
    """Titles covering every match tier for the query "BLU".

    - "BLu": case-insensitive exact match
    - "Big Lucky Umbrella": initials match
    - "blue", "Bluebird": substring matches
    - "abc", "Desert Airway": no match
    """
    return [
        "blue",
        "Big Lucky Umbrella",
        "BLu",
        "abc",
        "Bluebird",
        "Desert Airway",
    ]


@pytest.fixture
def titles_file(temp_dir: Path, sample_titles: List[str]) -> Path:
    """Write sample_titles to a plain-text file, one title per line.

    A blank line is included to check that blank lines are skipped.
    """
    path = temp_dir / "titles.txt"
    path.write_text("\n".join(sample_titles[:3] + [""] + sample_titles[3:]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def titles_json_file(temp_dir: Path, sample_titles: List[str]) -> Path:
    """Write sample_titles to a JSON array file."""
    path = temp_dir / "titles.json"
    path.write_text(json.dumps(sample_titles), encoding="utf-8")
    return path


@pytest.fixture
def sample_scored_matches() -> List[ScoredMatch]:
    """Ranked matches for "BLU", in the shape TitleMatcher.rank() returns."""
    return [
        ScoredMatch(MatchTier.EXACT_CASE_INSENSITIVE, 0.95, Candidate(2, "BLu")),
        ScoredMatch(MatchTier.INITIALS, 0.9, Candidate(1, "Big Lucky Umbrella")),
        ScoredMatch(MatchTier.SUBSTRING, 0.8, Candidate(0, "blue")),
        ScoredMatch(MatchTier.FUZZY_DISTANCE, 0.5, Candidate(6, "plum")),
    ]


@pytest.fixture
def sample_search_summary() -> SearchSummary:
    """Summary matching sample_scored_matches."""
    return SearchSummary(
        query="BLU",
        threshold=0.5,
        total_candidates=7,
        total_matches=4,
        tier_counts={
            MatchTier.EXACT_CASE_INSENSITIVE: 1,
            MatchTier.INITIALS: 1,
            MatchTier.SUBSTRING: 1,
            MatchTier.FUZZY_DISTANCE: 1,
        },
        duration=0.0042,
    )


@pytest.fixture
def console_output() -> tuple[Console, io.StringIO]:
    """Rich Console writing to a StringIO, without color codes.

    Returns:
        Tuple of (Console, StringIO for reading output).
    """
    output = io.StringIO()
    console = Console(file=output, width=120, color_system=None)
    return console, output
