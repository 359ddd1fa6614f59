"""Pydantic data models for css-order-analyzer."""

from css_order_analyzer.models.analysis import (
    AnalysisResult,
    ReportOptions,
    Verbosity,
)
from css_order_analyzer.models.config import WAIT_STATES, AnalyzerConfig
from css_order_analyzer.models.conflict import ConflictGroup, ElementConflict
from css_order_analyzer.models.style import (
    MatchedRule,
    RuleOrigin,
    Selector,
    SelectorText,
    SourceRange,
    Specificity,
)

__all__ = [
    "WAIT_STATES",
    "AnalysisResult",
    "AnalyzerConfig",
    "ConflictGroup",
    "ElementConflict",
    "MatchedRule",
    "ReportOptions",
    "RuleOrigin",
    "Selector",
    "SelectorText",
    "SourceRange",
    "Specificity",
    "Verbosity",
]
