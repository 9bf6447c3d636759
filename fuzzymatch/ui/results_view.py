"""Terminal output for fuzzymatch search results.

This module provides the ResultsView class, a Rich-based view that renders
ranked titles either as plain lines or as a table with tiers and scores.

Example:
    from fuzzymatch.ui import ResultsView

    view = ResultsView()
    view.display_results(scored_matches, summary)
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from fuzzymatch.models import ScoredMatch, SearchSummary


class ResultsView:
    """Rich-based renderer for ranked search results.

    Args:
        console: Optional Rich Console instance for output. If None, creates
            a new Console. Pass a custom Console for testing (e.g., with
            StringIO file for output capture).

    Attributes:
        console: The Rich Console instance used for all output.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def display_plain(self, scored_matches: List[ScoredMatch]) -> None:
        """Print the matched titles one per line, best match first."""
        for scored in scored_matches:
            self.console.print(scored.candidate.text, markup=False, highlight=False)

    def display_results(
        self, scored_matches: List[ScoredMatch], summary: SearchSummary
    ) -> None:
        """Display the ranked results in a formatted table.

        Shows a header panel with the search statistics and a table of the
        matched titles with their tier and score.

        Args:
            scored_matches: Ranked matches returned by TitleMatcher.rank().
            summary: Statistics for the search.
        """
        threshold_pct = int(round(summary.threshold * 100))
        header_text = (
            f"Query: {escape(summary.query)}\n"
            f"Titles searched: {summary.total_candidates:,}\n"
            f"Matches: {summary.total_matches}\n"
            f"Threshold: {threshold_pct}%"
        )
        self.console.print(Panel(header_text, title="Search Results", border_style="blue"))

        if not scored_matches:
            self.console.print("[yellow]No matching titles found.[/yellow]")
            return

        table = Table(title="Matches")
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Index", justify="right")
        table.add_column("Title", style="white")
        table.add_column("Tier", style="magenta")
        table.add_column("Score", justify="center")

        for rank, scored in enumerate(scored_matches, start=1):
            table.add_row(
                str(rank),
                str(scored.candidate.index),
                escape(self._truncate_name(scored.candidate.text)),
                scored.tier.value,
                self._format_score(int(round(scored.score * 100))),
            )

        self.console.print(table)

    def _format_score(self, score_pct: int) -> str:
        """Format a score percentage with color coding."""
        if score_pct >= 90:
            return f"[green]{score_pct}%[/green]"
        elif score_pct >= 70:
            return f"[yellow]{score_pct}%[/yellow]"
        else:
            return f"[red]{score_pct}%[/red]"

    def _truncate_name(self, name: str, max_length: int = 60) -> str:
        """Truncate long titles with ellipsis."""
        if len(name) > max_length:
            return name[: max_length - 3] + "..."
        return name
