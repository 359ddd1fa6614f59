"""JSON output formatter for analysis results."""
import json
from datetime import datetime, timezone
from typing import Any

from css_order_analyzer import __version__
from css_order_analyzer.engine.registry import StylesheetRegistry
from css_order_analyzer.models.analysis import AnalysisResult
from css_order_analyzer.models.conflict import ElementConflict
from css_order_analyzer.models.style import Selector


class JsonFormatter:
    """Format analysis results as JSON for programmatic processing."""

    def __init__(self, registry: StylesheetRegistry) -> None:
        self._registry = registry

    def format_analysis_result(self, result: AnalysisResult) -> str:
        """Format an analysis result as a JSON string.

        Args:
            result: The analysis result to format.

        Returns:
            Indented JSON document.
        """
        output = {
            "metadata": self._build_metadata(result),
            "summary": self._build_summary(result),
            "conflicts": [self._build_conflict(item) for item in result.conflicts],
        }
        return json.dumps(output, indent=2)

    def _build_metadata(self, result: AnalysisResult) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
            "url": result.url,
        }

    def _build_summary(self, result: AnalysisResult) -> dict[str, Any]:
        return {
            "status": "conflicts_found" if result.has_conflicts else "pass",
            "elements_scanned": result.elements_scanned,
            "conflicting_elements": result.conflicting_elements,
            "total_conflicts": len(result.conflicts),
            "stylesheets": len(self._registry),
            "stopped_early": result.stopped_early,
        }

    def _build_conflict(self, item: ElementConflict) -> dict[str, Any]:
        return {
            "node_id": item.node_id,
            "property": item.conflict.property_name,
            "specificity": item.conflict.specificity,
            "selectors": [self._build_selector(s) for s in item.conflict.selectors],
        }

    def _build_selector(self, selector: Selector) -> dict[str, Any]:
        return {
            "text": selector.text,
            "stylesheet_id": selector.stylesheet_id,
            "url": self._registry.lookup(selector.stylesheet_id),
            "range": selector.range.model_dump() if selector.range else None,
        }
