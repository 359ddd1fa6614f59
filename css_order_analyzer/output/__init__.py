"""Output formatters for css-order-analyzer."""

from css_order_analyzer.output.report_json import JsonFormatter
from css_order_analyzer.output.report_markdown import MarkdownFormatter
from css_order_analyzer.output.terminal import TerminalFormatter
from css_order_analyzer.output.text import ConflictTextFormatter

__all__ = [
    "ConflictTextFormatter",
    "JsonFormatter",
    "MarkdownFormatter",
    "TerminalFormatter",
]
