"""Exceptions raised by fuzzymatch."""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes a missing or wrongly typed argument.

    The matcher raises this before any ranking work begins, so a caller
    never receives a partial result.
    """
