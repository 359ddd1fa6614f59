"""CLI entry point for css-order-analyzer."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Literal, cast

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from css_order_analyzer import __version__
from css_order_analyzer.config import load_config
from css_order_analyzer.constants import EXIT_CONFLICTS, EXIT_ERROR, EXIT_SUCCESS
from css_order_analyzer.engine.registry import StylesheetRegistry
from css_order_analyzer.exceptions import ConfigurationError, CssOrderAnalyzerError
from css_order_analyzer.models.analysis import AnalysisResult, ReportOptions, Verbosity
from css_order_analyzer.output.report_json import JsonFormatter
from css_order_analyzer.output.report_markdown import MarkdownFormatter
from css_order_analyzer.output.terminal import TerminalFormatter
from css_order_analyzer.scanner import run_analysis

# Module-level console for consistent output
_console = Console()
# Separate console for conflict blocks and errors (writes to stderr)
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """CSS Order Analyzer - Find order-dependent styles on a web page.

    Loads a page in a headless browser and reports every property that
    several selectors of equal specificity set on the same element, since
    its value then depends on stylesheet order.

    \b
    Examples:
        css-order-analyzer check http://localhost:8000/index.html
        css-order-analyzer check https://example.com --format json
    """
    pass


@main.command()
@click.argument("url")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "markdown", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for the report (default: terminal).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write report to file instead of the terminal.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show a summary and debug logging.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Suppress conflict output; only the exit code reports the result.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--fail-fast",
    is_flag=True,
    default=False,
    help="Stop after the first element with a conflict.",
)
@click.option(
    "--headed",
    is_flag=True,
    default=False,
    help="Show the browser window while scanning.",
)
def check(
    url: str,
    output_format: str,
    output_path: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
    fail_fast: bool,
    headed: bool,
) -> None:
    """Check a page for order-dependent styles.

    Exits with status 0 when no conflicts are found and 1 when at least
    one conflict is found or the check fails.

    \b
    Examples:
        css-order-analyzer check http://localhost:8000/simple.html
        css-order-analyzer check https://example.com --format markdown
        css-order-analyzer check https://example.com --output report.json --format json
        css-order-analyzer check https://example.com --fail-fast --quiet
        css-order-analyzer check https://example.com --config custom-config.yaml
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    _configure_logging(verbosity)

    format_value = cast(Literal["terminal", "markdown", "json"], output_format.lower())
    options = ReportOptions(format=format_value, verbosity=verbosity)

    try:
        config = load_config(config_path)

        # Command-line flags take precedence over the configuration file
        updates: dict[str, bool] = {}
        if fail_fast:
            updates["fail_fast"] = True
        if headed:
            updates["headless"] = False
        if updates:
            config = config.model_copy(update=updates)

        registry = StylesheetRegistry()
        result = asyncio.run(run_analysis(url, registry, config))
        _display_result(result, registry, options, output_path)

        if result.has_conflicts:
            sys.exit(EXIT_CONFLICTS)
        sys.exit(EXIT_SUCCESS)

    except CssOrderAnalyzerError as e:
        _display_error(e, options.format)
        sys.exit(EXIT_ERROR)


def _configure_logging(verbosity: Verbosity) -> None:
    """Route library logging to stderr through Rich.

    Args:
        verbosity: DEBUG for verbose mode, WARNING otherwise.
    """
    level = logging.DEBUG if verbosity == Verbosity.VERBOSE else logging.WARNING
    package_logger = logging.getLogger("css_order_analyzer")
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=_error_console, show_path=False, markup=False)
        )
    package_logger.propagate = False


def _write_output_to_file(content: str, path: str) -> None:
    """Write report content to file.

    Args:
        content: The report content to write.
        path: The file path to write to.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    file_path = Path(path)

    try:
        if file_path.exists():
            _error_console.print(
                f"[yellow]Warning: Overwriting existing file: {path}[/yellow]"
            )
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e

    _error_console.print(f"[green]Report written to {path}[/green]")


def _display_result(
    result: AnalysisResult,
    registry: StylesheetRegistry,
    options: ReportOptions,
    output_path: str | None = None,
) -> None:
    """Display analysis results in the specified format.

    Args:
        result: The analysis result to display.
        registry: Registry resolving stylesheet URLs.
        options: Report options including format and verbosity.
        output_path: Optional file path to write output to.
    """
    if options.format == "json":
        content = JsonFormatter(registry).format_analysis_result(result)
    elif options.format == "markdown":
        content = MarkdownFormatter(registry).format_analysis_result(result)
    else:  # terminal
        if output_path:
            # Terminal format to file uses markdown instead
            content = MarkdownFormatter(registry).format_analysis_result(result)
        else:
            TerminalFormatter(
                registry, console=_error_console, verbosity=options.verbosity
            ).format_analysis_result(result)
            return

    if output_path:
        _write_output_to_file(content, output_path)
    else:
        click.echo(content)


def _display_error(error: CssOrderAnalyzerError, format_type: str) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    error_type = type(error).__name__
    message = f"Error: {error_type}: {error}"

    if format_type == "terminal":
        _error_console.print(
            f"[red bold]{escape(message)}[/red bold]", highlight=False, soft_wrap=True
        )
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
