"""Conversion of DevTools protocol payloads into models."""
from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from css_order_analyzer.exceptions import CollaboratorUnavailableError
from css_order_analyzer.models.style import MatchedRule, SelectorText, SourceRange


def parse_matched_rules(payload: dict[str, Any]) -> list[MatchedRule]:
    """Convert a ``CSS.getMatchedStylesForNode`` response into matched rules.

    Only ``matchedCSSRules`` is read; inline styles and inherited entries
    are not part of the result.

    Args:
        payload: Decoded protocol response.

    Returns:
        Matched rules in the order the engine reported them.

    Raises:
        CollaboratorUnavailableError: If the payload is malformed.
    """
    try:
        return [_parse_rule_match(match) for match in payload.get("matchedCSSRules") or []]
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise CollaboratorUnavailableError(
            f"Malformed matched styles response: {e}"
        ) from e


def _parse_rule_match(match: dict[str, Any]) -> MatchedRule:
    """Convert one ``RuleMatch`` entry."""
    rule = match["rule"]
    selectors = [
        SelectorText(
            text=entry["text"],
            range=SourceRange.model_validate(entry["range"]) if entry.get("range") else None,
        )
        for entry in rule["selectorList"]["selectors"]
    ]
    properties = [prop["name"] for prop in rule["style"]["cssProperties"]]

    return MatchedRule(
        origin=rule["origin"],
        stylesheet_id=rule.get("styleSheetId"),
        selectors=selectors,
        matching_selectors=list(match["matchingSelectors"]),
        properties=properties,
    )


def parse_stylesheet_header(params: dict[str, Any]) -> tuple[str, str]:
    """Extract ``(styleSheetId, sourceURL)`` from a ``CSS.styleSheetAdded`` event."""
    header = params["header"]
    return header["styleSheetId"], header.get("sourceURL", "")
