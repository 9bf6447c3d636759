"""Unit tests for SearchLogger."""

import os
import re
from pathlib import Path
from typing import List

import pytest

from fuzzymatch.models import ScoredMatch, SearchSummary
from fuzzymatch.reporting import SearchLogger


class TestSearchLoggerBasic:
    """Test basic SearchLogger functionality."""

    def test_log_file_creation_with_auto_generated_filename(self, temp_dir: Path):
        """Test that log file is created with auto-generated timestamped filename."""
        original_cwd = os.getcwd()
        try:
            os.chdir(temp_dir)
            with SearchLogger() as logger:
                log_path = logger.get_log_path()
                assert log_path.parent == temp_dir
                pattern = r"search_log_\d{4}-\d{2}-\d{2}_\d{2}-\d{2}-\d{2}\.log"
                assert re.match(pattern, log_path.name)
            assert log_path.exists()
        finally:
            os.chdir(original_cwd)

    def test_custom_log_file_path(self, temp_dir: Path):
        """Test that custom log file path is used correctly."""
        custom_path = temp_dir / "custom_search.log"
        with SearchLogger(log_file_path=custom_path) as logger:
            assert logger.get_log_path() == custom_path
            logger.log_header()

        content = custom_path.read_text()
        assert "fuzzymatch - Search Log" in content
        assert re.search(r"Timestamp: \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", content)

    def test_file_not_created_before_context(self, temp_dir: Path):
        """The file is only opened when entering the context."""
        log_path = temp_dir / "test.log"
        SearchLogger(log_file_path=log_path)
        assert not log_path.exists()

    def test_missing_parent_directory(self, temp_dir: Path):
        """Test that a missing parent directory raises OSError."""
        with pytest.raises(OSError, match="Parent directory does not exist"):
            SearchLogger(log_file_path=temp_dir / "missing" / "search.log")

    def test_parent_is_a_file(self, temp_dir: Path):
        """Test that a parent path that is a file raises OSError."""
        blocker = temp_dir / "blocker"
        blocker.write_text("x")
        with pytest.raises(OSError, match="not a directory"):
            SearchLogger(log_file_path=blocker / "search.log")

    def test_write_after_close_warns(self, temp_dir: Path, capsys):
        """Writing to a closed logger warns on stderr instead of raising."""
        logger = SearchLogger(log_file_path=temp_dir / "closed.log")
        logger.log_header()
        assert "closed log file" in capsys.readouterr().err


class TestSearchLoggerSections:
    """Test the content of each log section."""

    def test_search_section(self, temp_dir: Path):
        log_path = temp_dir / "search.log"
        with SearchLogger(log_path) as logger:
            logger.log_search("BLU", 0.5, temp_dir / "titles.txt", 6)

        content = log_path.read_text()
        assert "SEARCH" in content
        assert "Query: 'BLU'" in content
        assert "Threshold: 0.50" in content
        assert f"Titles file: {temp_dir / 'titles.txt'}" in content
        assert "Titles searched: 6" in content

    def test_search_section_without_titles_file(self, temp_dir: Path):
        log_path = temp_dir / "search.log"
        with SearchLogger(log_path) as logger:
            logger.log_search("BLU", 0.7, None, 3)

        assert "Titles file:" not in log_path.read_text()

    def test_results_section(self, temp_dir: Path, sample_scored_matches: List[ScoredMatch]):
        log_path = temp_dir / "search.log"
        with SearchLogger(log_path) as logger:
            logger.log_results(sample_scored_matches)

        lines = log_path.read_text().splitlines()
        assert "RESULTS" in lines
        assert "1. [2] BLu (exact_case_insensitive, 0.95)" in lines
        assert "2. [1] Big Lucky Umbrella (initials, 0.90)" in lines
        assert "3. [0] blue (substring, 0.80)" in lines
        assert "4. [6] plum (fuzzy_distance, 0.50)" in lines

    def test_empty_results_section(self, temp_dir: Path):
        log_path = temp_dir / "search.log"
        with SearchLogger(log_path) as logger:
            logger.log_results([])

        assert "No matches." in log_path.read_text()

    def test_summary_section(self, temp_dir: Path, sample_search_summary: SearchSummary):
        log_path = temp_dir / "search.log"
        with SearchLogger(log_path) as logger:
            logger.log_summary(sample_search_summary)

        content = log_path.read_text()
        assert "SUMMARY" in content
        assert "Titles searched: 7" in content
        assert "Matches: 4" in content
        assert "  - initials: 1" in content
        assert "  - substring: 1" in content
        assert "exact_case:" not in content
        assert "Duration: 4ms" in content
        assert f"Log file: {log_path}" in content

    def test_separators(self, temp_dir: Path, sample_search_summary: SearchSummary):
        log_path = temp_dir / "search.log"
        with SearchLogger(log_path) as logger:
            logger.log_header()
            logger.log_summary(sample_search_summary)

        separators = [line for line in log_path.read_text().splitlines() if line == "=" * 65]
        assert len(separators) == 5


class TestFormatting:
    """Test the formatting helpers."""

    @pytest.mark.parametrize(
        "seconds, expected",
        [(0.0, "0ms"), (0.0042, "4ms"), (0.5, "500ms"), (1.0, "1.00s"), (12.5, "12.50s")],
    )
    def test_format_duration(self, temp_dir: Path, seconds: float, expected: str):
        logger = SearchLogger(temp_dir / "x.log")
        assert logger._format_duration(seconds) == expected
