"""Reporting package for fuzzymatch.

This package contains the SearchLogger, which writes structured log files
for searches run from the command line.
"""

from fuzzymatch.reporting.search_logger import SearchLogger

__all__ = ["SearchLogger"]
