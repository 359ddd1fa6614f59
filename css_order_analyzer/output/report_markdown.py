"""Markdown output formatter for analysis results."""

from datetime import datetime, timezone

from css_order_analyzer.engine.registry import StylesheetRegistry
from css_order_analyzer.models.analysis import AnalysisResult
from css_order_analyzer.models.conflict import ElementConflict
from css_order_analyzer.output.text import format_span


class MarkdownFormatter:
    """Format analysis results as a Markdown report."""

    def __init__(self, registry: StylesheetRegistry) -> None:
        self._registry = registry

    def format_analysis_result(self, result: AnalysisResult) -> str:
        """Format an analysis result as a Markdown string.

        Args:
            result: The analysis result to format.

        Returns:
            Markdown document.
        """
        lines: list[str] = []

        lines.append("# CSS Order Dependency Report")
        lines.append("")
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        lines.append(f"*Generated: {timestamp}*")
        lines.append("")

        lines.extend(self._format_summary(result))
        lines.append("")

        if not result.has_conflicts:
            lines.append("*No order-dependent styles found.*")
            return "\n".join(lines) + "\n"

        lines.append("## Conflicts")
        lines.append("")
        for item in result.conflicts:
            lines.extend(self._format_conflict(item))
            lines.append("")

        return "\n".join(lines).rstrip() + "\n"

    def _format_summary(self, result: AnalysisResult) -> list[str]:
        status = "CONFLICTS FOUND" if result.has_conflicts else "PASS"
        lines = [
            "## Summary",
            "",
            "| Metric | Value |",
            "|--------|-------|",
            f"| URL | {result.url} |",
            f"| Status | **{status}** |",
            f"| Elements Scanned | {result.elements_scanned} |",
            f"| Conflicting Elements | {result.conflicting_elements} |",
            f"| Conflicts | {len(result.conflicts)} |",
            f"| Stylesheets | {len(self._registry)} |",
        ]
        if result.stopped_early:
            lines.append("")
            lines.append("> Scan stopped at the first conflicting element.")
        return lines

    def _format_conflict(self, item: ElementConflict) -> list[str]:
        conflict = item.conflict
        lines = [
            f"### `{conflict.property_name}` on node {item.node_id}",
            "",
            f"Specificity `{conflict.specificity}` is shared by "
            f"{len(conflict.selectors)} selectors:",
            "",
            "| Selector | URL | Span |",
            "|----------|-----|------|",
        ]
        for selector in conflict.selectors:
            text = selector.text.replace("|", "\\|")
            url = self._registry.source_url(selector.stylesheet_id)
            lines.append(f"| `{text}` | {url} | {format_span(selector.range)} |")
        return lines
