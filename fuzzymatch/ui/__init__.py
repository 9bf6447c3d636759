"""Terminal output package for fuzzymatch."""

from .results_view import ResultsView

__all__ = ["ResultsView"]
