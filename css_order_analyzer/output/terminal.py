"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console

from css_order_analyzer.engine.registry import StylesheetRegistry
from css_order_analyzer.models.analysis import AnalysisResult, Verbosity
from css_order_analyzer.output.text import ConflictTextFormatter


class TerminalFormatter:
    """Write conflict blocks to the terminal.

    Blocks go to the given console (stderr in the CLI), separated by a
    blank line. Selector text is printed literally, never as Rich markup.
    """

    def __init__(
        self,
        registry: StylesheetRegistry,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter.

        Args:
            registry: Registry used to resolve stylesheet URLs.
            console: Optional Rich Console instance. Defaults to stderr.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console(stderr=True)
        self._verbosity = verbosity
        self._text = ConflictTextFormatter(registry)
        self._registry = registry

    def format_analysis_result(self, result: AnalysisResult) -> None:
        """Display every conflict of an analysis.

        Quiet mode prints nothing; the exit status carries the outcome.

        Args:
            result: The analysis result to display.
        """
        if self._verbosity == Verbosity.QUIET:
            return

        for index, item in enumerate(result.conflicts):
            if index > 0:
                self._console.print("")
            self._console.print(
                self._text.format_conflict(item.conflict),
                markup=False,
                highlight=False,
                soft_wrap=True,
            )

        if self._verbosity == Verbosity.VERBOSE:
            self._print_summary(result)

    def _print_summary(self, result: AnalysisResult) -> None:
        if result.conflicts:
            self._console.print("")
        status = "[red]CONFLICTS FOUND[/red]" if result.has_conflicts else "[green]PASS[/green]"
        self._console.print(
            f"{status} - {len(result.conflicts)} conflict(s) on "
            f"{result.conflicting_elements} of {result.elements_scanned} element(s), "
            f"{len(self._registry)} stylesheet(s) loaded"
        )
        if result.stopped_early:
            self._console.print("[yellow]Scan stopped at the first conflicting element[/yellow]")
