"""
Core data models for fuzzymatch.

This module contains the following types:
- Candidate: One title from the input list, paired with its position
- ScoredMatch: A candidate classified into a match tier with its score
- MatchIndex: The (index, text) pair returned to callers
- SearchSummary: Totals for one search, used by the CLI log and view
"""

from dataclasses import dataclass, field
from typing import Dict, NamedTuple, Tuple

from .match_tier import MatchTier


class MatchIndex(NamedTuple):
    """Result entry; compares equal to a plain ``(index, text)`` tuple."""
    index: int
    text: str


@dataclass(frozen=True)
class Candidate:
    """Represents one title being evaluated against the query."""
    index: int                        # Zero-based position in the input
    text: str                         # Title as given, case preserved


@dataclass(frozen=True)
class ScoredMatch:
    """Represents a candidate that was retained by the matcher."""
    tier: MatchTier                   # Strongest tier that applied
    score: float                      # Tier-local score (0.0-1.0)
    candidate: Candidate              # Matched candidate

    @property
    def sort_key(self) -> Tuple[int, float, int]:
        """Ordering key: stronger tier, then higher score, then input order."""
        return (self.tier.rank, -self.score, self.candidate.index)

    def to_index(self) -> MatchIndex:
        return MatchIndex(self.candidate.index, self.candidate.text)


@dataclass
class SearchSummary:
    """Summary of a single search, filled in by the CLI."""
    query: str                        # Query as typed
    threshold: float                  # Effective threshold (0.0-1.0)
    total_candidates: int = 0         # Number of titles searched
    total_matches: int = 0            # Number of titles retained
    tier_counts: Dict[MatchTier, int] = field(default_factory=dict)  # Matches per tier
    duration: float = 0.0             # Search duration in seconds
