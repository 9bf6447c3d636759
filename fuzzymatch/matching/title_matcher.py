"""Title matching implementation for fuzzymatch.

This module provides the TitleMatcher class which implements a tiered
matching algorithm to rank a list of titles against a partially typed,
possibly misspelled query.

The matching algorithm uses five tiers, evaluated in order of decreasing
strength:
    1. Exact Case Match (score 1.0)
    2. Exact Case-Insensitive Match (score 0.95)
    3. Initials Match (score 0.9)
    4. Substring Match (score 0.8)
    5. Fuzzy Distance Match (0.0-1.0, Levenshtein similarity)

A title in a stronger tier always ranks ahead of a title in a weaker tier,
whatever their scores.

Example:
    >>> from fuzzymatch.matching import TitleMatcher
    >>> matcher = TitleMatcher(threshold=0.7)
    >>> matcher.match(["blue", "Big Lucky Umbrella", "BLu", "abc"], "BLU")
    [MatchIndex(index=2, text='BLu'), MatchIndex(index=1, text='Big Lucky Umbrella'), MatchIndex(index=0, text='blue')]
"""

import math
import numbers
from collections.abc import Iterable
from typing import Callable, List, Optional, Sequence, Tuple

from fuzzymatch.errors import InvalidArgumentError
from fuzzymatch.matching.distance import similarity
from fuzzymatch.matching.segmenter import initials
from fuzzymatch.models import Candidate, MatchIndex, MatchTier, ScoredMatch

DEFAULT_THRESHOLD = 0.7

# A tier rule returns the score for (title, query), or None if it does not apply
TierRule = Callable[[str, str], Optional[float]]


class TitleMatcher:
    """Ranks titles against a query using a tiered algorithm.

    Each title is evaluated against the tiers in order and classified by the
    first tier that applies. Titles whose score falls below the threshold, or
    that match no tier at all, are dropped.

    Attributes:
        threshold: Minimum score (0.0-1.0) a title needs in any tier to be
            kept. Values outside the range are clamped.

    Example:
        >>> matcher = TitleMatcher(threshold=0.7)
        >>> matcher.match(["candyjake", "candyjane", "abc"], "candycane")
        [MatchIndex(index=1, text='candyjane'), MatchIndex(index=0, text='candyjake')]
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD) -> None:
        """Initialize the TitleMatcher.

        Args:
            threshold: Minimum score for a match. Clamped to 0.0-1.0.
                Defaults to 0.7.

        Raises:
            InvalidArgumentError: If threshold is not a real number.
        """
        self.threshold = self._clamp_threshold(threshold)
        self._tier_rules: Tuple[Tuple[MatchTier, TierRule], ...] = (
            (MatchTier.EXACT_CASE, self._match_exact_case),
            (MatchTier.EXACT_CASE_INSENSITIVE, self._match_exact_case_insensitive),
            (MatchTier.INITIALS, self._match_initials),
            (MatchTier.SUBSTRING, self._match_substring),
            (MatchTier.FUZZY_DISTANCE, self._match_fuzzy_distance),
        )

    def match(self, candidates: Sequence[str], query: str) -> List[MatchIndex]:
        """Rank titles against a query.

        Args:
            candidates: Titles to search. The sequence is not modified.
            query: Text typed by the user.

        Returns:
            List of (index, text) pairs, strongest match first. Empty if the
            query or the candidate list is empty, or nothing matched.

        Raises:
            InvalidArgumentError: If candidates or query are missing, or a
                candidate is not a string.
        """
        return [scored.to_index() for scored in self.rank(candidates, query)]

    def rank(self, candidates: Sequence[str], query: str) -> List[ScoredMatch]:
        """Classify, filter and order titles, keeping their tiers and scores.

        Same contract as match(), but returns ScoredMatch entries.
        """
        titles = self._validate_candidates(candidates)
        if not isinstance(query, str):
            raise InvalidArgumentError(
                f"query must be a string, got {type(query).__name__}"
            )

        if not query or not titles:
            return []

        results: List[ScoredMatch] = []
        for index, text in enumerate(titles):
            scored = self._classify(Candidate(index, text), query)
            if scored is None or scored.score < self.threshold:
                continue
            # An exact hit is the only result
            if scored.tier is MatchTier.EXACT_CASE:
                return [scored]
            results.append(scored)

        results.sort(key=lambda scored: scored.sort_key)
        return results

    def _classify(self, candidate: Candidate, query: str) -> Optional[ScoredMatch]:
        """Return the first tier that applies to the candidate, or None."""
        for tier, rule in self._tier_rules:
            score = rule(candidate.text, query)
            if score is not None:
                return ScoredMatch(tier=tier, score=score, candidate=candidate)
        return None

    def _match_exact_case(self, text: str, query: str) -> Optional[float]:
        """Tier 1: title and query are identical."""
        if text == query:
            return MatchTier.EXACT_CASE.fixed_score
        return None

    def _match_exact_case_insensitive(self, text: str, query: str) -> Optional[float]:
        """Tier 2: title and query are identical once lower-cased.

        Example:
            >>> matcher._match_exact_case_insensitive("BLu", "BLU")
            0.95
        """
        if text.lower() == query.lower():
            return MatchTier.EXACT_CASE_INSENSITIVE.fixed_score
        return None

    def _match_initials(self, text: str, query: str) -> Optional[float]:
        """Tier 3: the first letters of the title's words spell the query.

        Only whole initials count: the query must have exactly one letter per
        word of the title.

        Example:
            >>> matcher._match_initials("Big Lucky Umbrella", "blu")
            0.9
        """
        if initials(text) == query.upper():
            return MatchTier.INITIALS.fixed_score
        return None

    def _match_substring(self, text: str, query: str) -> Optional[float]:
        """Tier 4: the title contains the query, ignoring case."""
        if query.lower() in text.lower():
            return MatchTier.SUBSTRING.fixed_score
        return None

    def _match_fuzzy_distance(self, text: str, query: str) -> Optional[float]:
        """Tier 5: Levenshtein similarity between title and query.

        Always applies; the threshold check in rank() drops weak matches.

        Example:
            >>> matcher._match_fuzzy_distance("candyjane", "candycane")
            0.888...
        """
        return similarity(text, query)

    @staticmethod
    def _clamp_threshold(threshold: float) -> float:
        if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real):
            raise InvalidArgumentError(
                f"threshold must be a number, got {type(threshold).__name__}"
            )
        if math.isnan(threshold):
            raise InvalidArgumentError("threshold must be a number, got NaN")
        return min(max(float(threshold), 0.0), 1.0)

    @staticmethod
    def _validate_candidates(candidates: Sequence[str]) -> List[str]:
        """Check the candidate list and return it as a list of strings."""
        if candidates is None:
            raise InvalidArgumentError("candidates must be a sequence of strings, got None")
        if isinstance(candidates, (str, bytes)) or not isinstance(candidates, Iterable):
            raise InvalidArgumentError(
                f"candidates must be a sequence of strings, got {type(candidates).__name__}"
            )

        titles = list(candidates)
        for index, text in enumerate(titles):
            if not isinstance(text, str):
                raise InvalidArgumentError(
                    f"candidate {index} must be a string, got {type(text).__name__}"
                )
        return titles


def match(
    candidates: Sequence[str], query: str, threshold: float = DEFAULT_THRESHOLD
) -> List[MatchIndex]:
    """Rank titles against a query; see TitleMatcher.match().

    Example:
        >>> match(["foo", "bar", "abc"], "foo", 0.7)
        [MatchIndex(index=0, text='foo')]
    """
    return TitleMatcher(threshold).match(candidates, query)
