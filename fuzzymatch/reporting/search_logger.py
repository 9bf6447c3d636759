"""SearchLogger for logging title searches in formatted output.

This module provides the SearchLogger class that writes a structured log file
for a CLI search: a header, the search parameters, the ranked results and a
summary section.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO

from fuzzymatch.models import MatchTier, ScoredMatch, SearchSummary


class SearchLogger:
    """Logger for title searches with structured output format.

    Usage:
        with SearchLogger(log_file_path) as logger:
            logger.log_header()
            logger.log_search(query, threshold, titles_path, total_candidates)
            logger.log_results(scored_matches)
            logger.log_summary(summary)

    Attributes:
        SEPARATOR: The 65-character separator line used between sections.
    """

    SEPARATOR = "=" * 65

    def __init__(self, log_file_path: Optional[Path] = None) -> None:
        """Initialize the SearchLogger.

        Args:
            log_file_path: Optional path for the log file. If not provided,
                generates a timestamped filename in the current directory.

        Raises:
            OSError: If the log file path is not writable.
        """
        self._start_timestamp = datetime.now()
        self._file_handle: Optional[TextIO] = None

        if log_file_path is None:
            timestamp_str = self._start_timestamp.strftime("%Y-%m-%d_%H-%M-%S")
            self._log_file_path = Path.cwd() / f"search_log_{timestamp_str}.log"
        else:
            self._log_file_path = Path(log_file_path)

        self._validate_path()

    def _validate_path(self) -> None:
        """Validate that the log file path is writable.

        Raises:
            OSError: If the parent directory doesn't exist or is not writable.
        """
        parent = self._log_file_path.parent
        if not parent.exists():
            raise OSError(f"Parent directory does not exist: {parent}")
        if not parent.is_dir():
            raise OSError(f"Parent path is not a directory: {parent}")
        try:
            test_file = parent / f".fuzzymatch_test_{id(self)}"
            test_file.touch()
            test_file.unlink()
        except PermissionError:
            raise OSError(f"Permission denied: cannot write to {parent}")

    def __enter__(self) -> "SearchLogger":
        """Open the log file for writing.

        Raises:
            OSError: If the file cannot be opened for writing.
        """
        try:
            self._file_handle = open(self._log_file_path, "w", encoding="utf-8")
        except OSError as e:
            raise OSError(f"Cannot open log file for writing: {e}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close the log file, even if an exception occurred."""
        if self._file_handle is not None:
            try:
                self._file_handle.close()
            except OSError as e:
                print(f"Warning: Error closing log file: {e}", file=sys.stderr)
            finally:
                self._file_handle = None

    def get_log_path(self) -> Path:
        return self._log_file_path

    def log_header(self) -> None:
        """Write the title and timestamp section."""
        self._write_separator()
        self._write_line("fuzzymatch - Search Log")
        self._write_separator()
        self._write_line(f"Timestamp: {self._format_timestamp(self._start_timestamp)}")
        self._write_line("")

    def log_search(
        self,
        query: str,
        threshold: float,
        titles_path: Optional[Path],
        total_candidates: int,
    ) -> None:
        """Write the search parameters section.

        Args:
            query: Query as typed by the user.
            threshold: Effective threshold (0.0-1.0).
            titles_path: File the titles were loaded from, if any.
            total_candidates: Number of titles searched.
        """
        self._write_separator()
        self._write_line("SEARCH")
        self._write_separator()
        self._write_line(f"Query: {query!r}")
        self._write_line(f"Threshold: {threshold:.2f}")
        if titles_path is not None:
            self._write_line(f"Titles file: {titles_path}")
        self._write_line(f"Titles searched: {total_candidates}")
        self._write_line("")

    def log_results(self, scored_matches: List[ScoredMatch]) -> None:
        """Write one line per retained title, in ranked order."""
        self._write_separator()
        self._write_line("RESULTS")
        self._write_separator()
        if not scored_matches:
            self._write_line("No matches.")
        for rank, scored in enumerate(scored_matches, start=1):
            self._write_line(
                f"{rank}. [{scored.candidate.index}] {scored.candidate.text} "
                f"({scored.tier.value}, {scored.score:.2f})"
            )
        self._write_line("")

    def log_summary(self, summary: SearchSummary) -> None:
        """Write the summary section.

        Args:
            summary: The SearchSummary object with aggregated statistics.
        """
        self._write_separator()
        self._write_line("SUMMARY")
        self._write_separator()
        self._write_line(f"Titles searched: {summary.total_candidates:,}")
        self._write_line(f"Matches: {summary.total_matches:,}")
        for tier in MatchTier:
            count = summary.tier_counts.get(tier, 0)
            if count:
                self._write_line(f"- {tier.value}: {count}", indent=2)
        self._write_line(f"Duration: {self._format_duration(summary.duration)}")
        self._write_line("")
        self._write_line(f"Log file: {self._log_file_path}")
        self._write_separator()

    def _format_duration(self, seconds: float) -> str:
        """Format a duration as "850ms" below one second, "2.35s" above."""
        if seconds < 1:
            return f"{int(seconds * 1000)}ms"
        return f"{seconds:.2f}s"

    def _format_timestamp(self, dt: datetime) -> str:
        return dt.strftime("%Y-%m-%d %H:%M:%S")

    def _write_separator(self) -> None:
        self._write_line(self.SEPARATOR)

    def _write_line(self, text: str, indent: int = 0) -> None:
        """Write a line to the log file with optional indentation.

        Args:
            text: The text to write.
            indent: Number of spaces to indent the line.
        """
        if self._file_handle is None:
            print(
                f"Warning: Attempted to write to closed log file: {text}",
                file=sys.stderr,
            )
            return

        try:
            self._file_handle.write(" " * indent + text + "\n")
        except OSError as e:
            print(f"Warning: Error writing to log file: {e}", file=sys.stderr)
