"""Title matching package for fuzzymatch.

This package contains the matching core: word segmentation for initials,
case-insensitive edit distance, and the TitleMatcher that ranks titles
against a query.

Example:
    >>> from fuzzymatch.matching import match, distance, segment
    >>> match(["foo", "bar", "abc"], "foo", 0.7)
    [MatchIndex(index=0, text='foo')]
    >>> distance("kitten", "mutton")
    3
    >>> list(segment("aHappyDay"))
    ['a', 'Happy', 'Day']
"""

from .distance import distance, similarity
from .segmenter import Segments, initials, segment
from .title_matcher import DEFAULT_THRESHOLD, TitleMatcher, match

__all__ = [
    "DEFAULT_THRESHOLD",
    "Segments",
    "TitleMatcher",
    "distance",
    "initials",
    "match",
    "segment",
    "similarity",
]
