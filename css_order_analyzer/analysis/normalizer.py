"""Flattening of matched rules into property-to-selector mappings."""

from __future__ import annotations

from typing import Iterable, Optional

from css_order_analyzer.models.style import MatchedRule, Selector


def normalize_matched_rules(
    rules: Iterable[MatchedRule],
    ignored_properties: Optional[Iterable[str]] = None,
) -> dict[str, list[Selector]]:
    """Map each declared property to the selectors that set it on one element.

    Only author (``regular`` origin) rules participate. A rule contributes
    its matching selectors, and only those, to every property it declares.
    Property names are compared by exact text, so ``margin`` and
    ``margin-top`` are distinct keys.

    Args:
        rules: Matched rules for a single element.
        ignored_properties: Property names to leave out of the mapping.

    Returns:
        Mapping of property name to selectors in discovery order.
        Properties no author rule declares are absent.
    """
    ignored = set(ignored_properties or ())
    property_map: dict[str, list[Selector]] = {}

    for rule in rules:
        if not rule.is_author_rule:
            continue

        selectors = rule.matched_selectors()

        # A property declared twice in one rule still counts the rule once
        for prop in dict.fromkeys(rule.properties):
            if prop in ignored:
                continue
            property_map.setdefault(prop, []).extend(selectors)

    return property_map
