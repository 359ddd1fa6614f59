"""Order-dependent style detection.

Finds properties that several selectors of identical specificity set on
the same element. For such properties the cascade falls back to
declaration order, so the rendered value depends on stylesheet order.
"""
from __future__ import annotations

from typing import Iterator, Mapping, Optional, Sequence

from css_order_analyzer.analysis.specificity import (
    SpecificityCalculator,
    hash_specificity,
    specificity_of,
)
from css_order_analyzer.models.conflict import ConflictGroup
from css_order_analyzer.models.style import Selector


class ConflictDetector:
    """Detects ties in specificity between selectors setting one property.

    Properties are independent: a tie on one property never affects
    another. Selectors that differ in specificity have a deterministic
    winner and are never reported.
    """

    def __init__(self, calculator: Optional[SpecificityCalculator] = None) -> None:
        """Initialize the detector.

        Args:
            calculator: Specificity capability. Defaults to the tinycss2-backed one.
        """
        self._calculator = calculator

    def detect(
        self, property_map: Mapping[str, Sequence[Selector]]
    ) -> Iterator[ConflictGroup]:
        """Yield every group of tied selectors, one property at a time.

        Properties are visited in mapping order and specificity buckets in
        first-seen order. Selectors keep their input order inside a group,
        and duplicates are kept.

        Args:
            property_map: Property name to matching selectors for one element.

        Yields:
            ConflictGroup for each bucket of two or more selectors.

        Raises:
            MalformedSelectorError: If a selector's specificity is ambiguous.
        """
        for prop, selectors in property_map.items():
            buckets: dict[str, list[Selector]] = {}
            for selector in selectors:
                spec_hash = hash_specificity(
                    specificity_of(selector.text, self._calculator)
                )
                buckets.setdefault(spec_hash, []).append(selector)

            for spec_hash, tied in buckets.items():
                # A single selector wins deterministically
                if len(tied) < 2:
                    continue

                yield ConflictGroup(
                    property_name=prop,
                    specificity=spec_hash,
                    selectors=tied,
                )
