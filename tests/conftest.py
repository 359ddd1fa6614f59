"""Shared fixtures for css-order-analyzer tests."""
from __future__ import annotations

from typing import Any, Callable, Optional

import pytest
from click.testing import CliRunner

from css_order_analyzer.engine.base import StyleEngine
from css_order_analyzer.engine.registry import StylesheetRegistry
from css_order_analyzer.models.style import MatchedRule, SelectorText, SourceRange


class FakeStyleEngine(StyleEngine):
    """In-memory style engine serving canned matched rules."""

    def __init__(
        self,
        registry: StylesheetRegistry,
        elements: Optional[dict[int, list[MatchedRule]]] = None,
        stylesheets: Optional[dict[str, str]] = None,
    ) -> None:
        super().__init__(registry)
        self.elements = elements or {}
        self.stylesheets = stylesheets or {}
        self.loaded_url: Optional[str] = None
        self.matched_calls: list[int] = []
        self.started = False
        self.closed = False

    async def start(self) -> None:
        self.started = True

    async def close(self) -> None:
        self.closed = True

    async def load(self, url: str) -> None:
        self.loaded_url = url
        for stylesheet_id, source_url in self.stylesheets.items():
            self.registry.record(stylesheet_id, source_url)

    async def list_all_elements(self) -> list[int]:
        return list(self.elements)

    async def get_matched_rules(self, node_id: int) -> list[MatchedRule]:
        self.matched_calls.append(node_id)
        return self.elements[node_id]


class LateStylesheetEngine(FakeStyleEngine):
    """Fake engine whose stylesheet notifications trail the rules using them.

    Stylesheets listed for a node are announced only once the caller drains
    pending notifications after fetching that node's matched rules.
    """

    def __init__(
        self,
        registry: StylesheetRegistry,
        elements: dict[int, list[MatchedRule]],
        late_stylesheets: dict[int, dict[str, str]],
    ) -> None:
        super().__init__(registry, elements)
        self.late_stylesheets = late_stylesheets
        self.pending: dict[str, str] = {}

    async def get_matched_rules(self, node_id: int) -> list[MatchedRule]:
        self.pending.update(self.late_stylesheets.get(node_id, {}))
        return await super().get_matched_rules(node_id)

    async def drain_notifications(self) -> None:
        for stylesheet_id, source_url in self.pending.items():
            self.registry.record(stylesheet_id, source_url)
        self.pending.clear()


def make_rule(
    selectors: list[str],
    properties: list[str],
    stylesheet_id: str = "sheet-1",
    matching: Optional[list[int]] = None,
    origin: str = "regular",
    line: int = 0,
) -> MatchedRule:
    """Build a matched rule whose selectors sit on consecutive lines."""
    return MatchedRule(
        origin=origin,
        stylesheet_id=stylesheet_id,
        selectors=[
            SelectorText(
                text=text,
                range=SourceRange(
                    start_line=line + i,
                    start_column=0,
                    end_line=line + i,
                    end_column=len(text),
                ),
            )
            for i, text in enumerate(selectors)
        ],
        matching_selectors=matching if matching is not None else list(range(len(selectors))),
        properties=properties,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> StylesheetRegistry:
    """Provide an empty stylesheet registry."""
    return StylesheetRegistry()


@pytest.fixture
def rule_factory() -> Callable[..., MatchedRule]:
    """Provide the matched rule builder."""
    return make_rule


@pytest.fixture
def engine_factory(
    registry: StylesheetRegistry,
) -> Callable[..., FakeStyleEngine]:
    """Provide a builder for fake engines bound to the registry fixture."""

    def build(
        elements: Optional[dict[int, list[MatchedRule]]] = None,
        stylesheets: Optional[dict[str, Any]] = None,
    ) -> FakeStyleEngine:
        return FakeStyleEngine(registry, elements, stylesheets)

    return build


@pytest.fixture
def late_engine_factory(
    registry: StylesheetRegistry,
) -> Callable[..., LateStylesheetEngine]:
    """Provide a builder for engines announcing stylesheets late."""

    def build(
        elements: dict[int, list[MatchedRule]],
        late_stylesheets: dict[int, dict[str, str]],
    ) -> LateStylesheetEngine:
        return LateStylesheetEngine(registry, elements, late_stylesheets)

    return build
