"""Conflict analysis logic for css-order-analyzer."""
from css_order_analyzer.analysis.conflicts import ConflictDetector
from css_order_analyzer.analysis.normalizer import normalize_matched_rules
from css_order_analyzer.analysis.specificity import (
    SelectorSpecificityCalculator,
    SpecificityCalculator,
    hash_specificity,
    specificity_of,
)

__all__ = [
    "ConflictDetector",
    "SelectorSpecificityCalculator",
    "SpecificityCalculator",
    "hash_specificity",
    "normalize_matched_rules",
    "specificity_of",
]
