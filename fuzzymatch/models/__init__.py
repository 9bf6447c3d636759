"""
Models package for fuzzymatch.

This package provides convenient imports for all data models:
- MatchTier: Enum for match quality tiers
- Candidate: Input title with its position
- ScoredMatch: Classified and scored candidate
- MatchIndex: (index, text) result pair
- SearchSummary: Search totals for reporting
"""

from .match_tier import MatchTier
from .data_models import (
    Candidate,
    MatchIndex,
    ScoredMatch,
    SearchSummary,
)

__all__ = [
    "MatchTier",
    "Candidate",
    "MatchIndex",
    "ScoredMatch",
    "SearchSummary",
]
