"""Plain-text rendering of conflict blocks."""

from css_order_analyzer.engine.registry import StylesheetRegistry
from css_order_analyzer.models.conflict import ConflictGroup
from css_order_analyzer.models.style import Selector, SourceRange


def format_span(source_range: SourceRange | None) -> str:
    """Render a source range as reported by the engine, without adjustment."""
    if source_range is None:
        return "unknown"
    return (
        f"Line {source_range.start_line}, column {source_range.start_column} - "
        f"line {source_range.end_line}, column {source_range.end_column}"
    )


class ConflictTextFormatter:
    """Format a conflict group as a human-readable text block."""

    def __init__(self, registry: StylesheetRegistry) -> None:
        self._registry = registry

    def format_conflict(self, conflict: ConflictGroup) -> str:
        """Format one conflict group.

        Args:
            conflict: The conflict to render.

        Returns:
            Header line followed by one paragraph per selector.
        """
        header = (
            f"Conflict, multiple selectors set `{conflict.property_name}` "
            f"with the specificity `{conflict.specificity}` and are "
            "order-dependent as a result:"
        )
        paragraphs = [self._format_selector(selector) for selector in conflict.selectors]
        return header + "\n" + "\n\n".join(paragraphs)

    def _format_selector(self, selector: Selector) -> str:
        return "\n".join([
            f"Selector: {selector.text}",
            f"URL: {self._registry.source_url(selector.stylesheet_id)}",
            f"Span: {format_span(selector.range)}",
        ])
