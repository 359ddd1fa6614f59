"""Tests for DevTools protocol payload conversion."""
from typing import Any

import pytest

from css_order_analyzer.engine.protocol import (
    parse_matched_rules,
    parse_stylesheet_header,
)
from css_order_analyzer.exceptions import CollaboratorUnavailableError


def rule_match(
    selectors: list[str],
    properties: list[str],
    matching: list[int],
    origin: str = "regular",
    stylesheet_id: str | None = "12.3",
) -> dict[str, Any]:
    """Build a RuleMatch payload as Chromium reports it."""
    rule: dict[str, Any] = {
        "selectorList": {
            "selectors": [
                {
                    "text": text,
                    "range": {
                        "startLine": i,
                        "startColumn": 0,
                        "endLine": i,
                        "endColumn": len(text),
                    },
                }
                for i, text in enumerate(selectors)
            ],
            "text": ", ".join(selectors),
        },
        "origin": origin,
        "style": {
            "cssProperties": [{"name": name, "value": "x"} for name in properties],
            "shorthandEntries": [],
        },
    }
    if stylesheet_id is not None:
        rule["styleSheetId"] = stylesheet_id
    return {"rule": rule, "matchingSelectors": matching}


class TestParseMatchedRules:
    """Tests for parse_matched_rules function."""

    def test_parses_rule(self) -> None:
        """Test a regular rule is converted with all its parts."""
        payload = {"matchedCSSRules": [rule_match(["h1", "p"], ["color", "margin"], [1])]}

        rules = parse_matched_rules(payload)

        assert len(rules) == 1
        rule = rules[0]
        assert rule.origin == "regular"
        assert rule.stylesheet_id == "12.3"
        assert [s.text for s in rule.selectors] == ["h1", "p"]
        assert rule.matching_selectors == [1]
        assert rule.properties == ["color", "margin"]

    def test_parses_ranges(self) -> None:
        """Test camelCase ranges become SourceRange models."""
        payload = {"matchedCSSRules": [rule_match(["h1", "p"], ["color"], [1])]}

        selector_range = parse_matched_rules(payload)[0].selectors[1].range

        assert selector_range is not None
        assert selector_range.start_line == 1
        assert selector_range.start_column == 0
        assert selector_range.end_line == 1
        assert selector_range.end_column == 1

    def test_selector_without_range(self) -> None:
        """Test selectors of rules without source data have no range."""
        match = rule_match(["p"], ["color"], [0], origin="user-agent", stylesheet_id=None)
        del match["rule"]["selectorList"]["selectors"][0]["range"]

        rule = parse_matched_rules({"matchedCSSRules": [match]})[0]

        assert rule.selectors[0].range is None
        assert rule.stylesheet_id is None

    def test_keeps_order_and_origins(self) -> None:
        """Test rules keep engine order and every origin is preserved."""
        payload = {
            "matchedCSSRules": [
                rule_match(["p"], ["display"], [0], origin="user-agent"),
                rule_match(["p"], ["color"], [0]),
            ]
        }

        rules = parse_matched_rules(payload)

        assert [r.origin for r in rules] == ["user-agent", "regular"]

    def test_ignores_inline_style(self) -> None:
        """Test inline style declarations are not part of the result."""
        payload = {
            "inlineStyle": {"cssProperties": [{"name": "color", "value": "red"}]},
            "matchedCSSRules": [],
        }

        assert parse_matched_rules(payload) == []

    def test_missing_matched_rules(self) -> None:
        """Test a response without matched rules has no rules."""
        assert parse_matched_rules({}) == []

    def test_missing_key_raises(self) -> None:
        """Test a malformed payload is reported as a collaborator failure."""
        payload = {"matchedCSSRules": [{"matchingSelectors": [0]}]}

        with pytest.raises(CollaboratorUnavailableError, match="Malformed"):
            parse_matched_rules(payload)

    def test_out_of_range_index_raises(self) -> None:
        """Test matching indices outside the selector list are rejected."""
        payload = {"matchedCSSRules": [rule_match(["p"], ["color"], [3])]}

        with pytest.raises(CollaboratorUnavailableError):
            parse_matched_rules(payload)


class TestParseStylesheetHeader:
    """Tests for parse_stylesheet_header function."""

    def test_extracts_id_and_url(self) -> None:
        """Test id and URL are read from the event header."""
        params = {
            "header": {
                "styleSheetId": "7.1",
                "sourceURL": "http://localhost:8000/simple.css",
                "origin": "regular",
            }
        }

        assert parse_stylesheet_header(params) == (
            "7.1",
            "http://localhost:8000/simple.css",
        )

    def test_missing_url_is_empty(self) -> None:
        """Test a header without a URL yields an empty string."""
        assert parse_stylesheet_header({"header": {"styleSheetId": "7.2"}}) == ("7.2", "")
