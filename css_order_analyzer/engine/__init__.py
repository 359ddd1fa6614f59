"""Style engines and stylesheet tracking."""

from css_order_analyzer.engine.base import StyleEngine
from css_order_analyzer.engine.chromium import ChromiumStyleEngine
from css_order_analyzer.engine.protocol import parse_matched_rules
from css_order_analyzer.engine.registry import StylesheetRegistry

__all__ = [
    "ChromiumStyleEngine",
    "StyleEngine",
    "StylesheetRegistry",
    "parse_matched_rules",
]
