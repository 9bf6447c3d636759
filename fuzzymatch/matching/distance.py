"""Case-insensitive edit distance for fuzzymatch.

Both inputs are lower-cased before comparison, so "KITteN" and "mUttoN" are
as far apart as "kitten" and "mutton". The Levenshtein computation itself is
delegated to RapidFuzz.
"""

from rapidfuzz.distance import Levenshtein

from fuzzymatch.errors import InvalidArgumentError


def _normalize(value: str, name: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{name} must be a string, got {type(value).__name__}"
        )
    return value.lower()


def distance(a: str, b: str) -> int:
    """Minimum number of single-character edits turning a into b.

    Insertions, deletions and substitutions each cost 1. Comparison ignores
    case.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Non-negative edit distance; 0 if the strings are equal ignoring case.

    Raises:
        InvalidArgumentError: If either argument is not a string.

    Example:
        >>> distance("kitten", "mutton")
        3
    """
    return Levenshtein.distance(_normalize(a, "a"), _normalize(b, "b"))


def similarity(a: str, b: str) -> float:
    """Edit distance rescaled to 0.0-1.0 by the longer string's length.

    Formula: 1 - distance / max(len(a), len(b), 1)

    Lengths are those of the arguments as given, not of their lower-cased
    forms, which can be longer (e.g. "İ").

    Two empty strings are fully similar (1.0).
    """
    left = _normalize(a, "a")
    right = _normalize(b, "b")
    longest = max(len(a), len(b), 1)
    score = 1.0 - Levenshtein.distance(left, right) / longest
    return min(max(score, 0.0), 1.0)
