"""
MatchTier enum for the five-tier title matching algorithm.

The matching algorithm uses five tiers, in order of evaluation:
1. Exact Case (score 1.0) - Title equals the query character for character
2. Exact Case-Insensitive (score 0.95) - Title equals the query ignoring case
3. Initials (score 0.9) - The initials of the title's words spell the query
4. Substring (score 0.8) - The title contains the query, ignoring case
5. Fuzzy Distance (scaled) - Levenshtein similarity between title and query
"""

from enum import Enum
from typing import Optional


class MatchTier(Enum):
    """Encodes the match quality categories, declared strongest first."""
    EXACT_CASE = "exact_case"                          # Tier 1: Character-for-character match
    EXACT_CASE_INSENSITIVE = "exact_case_insensitive"  # Tier 2: Match after case folding
    INITIALS = "initials"                              # Tier 3: Word initials spell the query
    SUBSTRING = "substring"                            # Tier 4: Query contained in the title
    FUZZY_DISTANCE = "fuzzy_distance"                  # Tier 5: Edit-distance similarity

    @property
    def rank(self) -> int:
        """Position of the tier in evaluation order (0 is strongest)."""
        return _TIER_ORDER.index(self)

    @property
    def fixed_score(self) -> Optional[float]:
        """Constant score assigned by the tier, or None when it is computed."""
        return _FIXED_SCORES.get(self)


_TIER_ORDER = tuple(MatchTier)

_FIXED_SCORES = {
    MatchTier.EXACT_CASE: 1.0,
    MatchTier.EXACT_CASE_INSENSITIVE: 0.95,
    MatchTier.INITIALS: 0.9,
    MatchTier.SUBSTRING: 0.8,
}
