"""Word segmentation for fuzzymatch.

Splits identifier-like or delimiter-separated titles into their constituent
words so that initials can be derived from them. Words are separated by any
non-alphanumeric character (hyphen, underscore, whitespace, punctuation) and
by lowercase-to-uppercase transitions:

    >>> list(segment("candyDay"))
    ['candy', 'Day']
    >>> list(segment("pacific-cruise ship"))
    ['pacific', 'cruise', 'ship']
    >>> initials("Big Lucky Umbrella")
    'BLU'
"""

import re
from typing import Iterator, Sequence

from fuzzymatch.errors import InvalidArgumentError


class Segments:
    """Lazy, restartable sequence of the word fragments of a string.

    No work is done until the object is iterated, and every iteration scans
    the text again, so the fragments can be consumed any number of times.

    Attributes:
        text: The string being segmented.
    """

    # Runs of alphanumeric characters; everything else is a delimiter
    _CHUNK_PATTERN = re.compile(r'[^\W_]+')

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[str]:
        for chunk in self._CHUNK_PATTERN.finditer(self.text):
            yield from self._split_case(chunk.group())

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Segments, Sequence)) and not isinstance(other, str):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Segments({list(self)!r})"

    @staticmethod
    def _split_case(chunk: str) -> Iterator[str]:
        """Split a delimiter-free chunk before each lower-to-upper transition.

        Consecutive uppercase letters stay together, so "BLu" is one word
        while "aHappyDay" is three.
        """
        start = 0
        for i in range(1, len(chunk)):
            if chunk[i - 1].islower() and chunk[i].isupper():
                yield chunk[start:i]
                start = i
        yield chunk[start:]


def segment(text: str) -> Segments:
    """Split a string into its word fragments.

    Args:
        text: String to segment, e.g. a title or an identifier.

    Returns:
        A Segments iterable over the non-empty fragments, left to right.

    Raises:
        InvalidArgumentError: If text is not a string.
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"text must be a string, got {type(text).__name__}"
        )
    return Segments(text)


def initials(text: str) -> str:
    """Return the uppercased first letters of each word fragment of text."""
    return "".join(fragment[0] for fragment in segment(text)).upper()
