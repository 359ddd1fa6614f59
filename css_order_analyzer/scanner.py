"""Scanner module driving conflict detection across a loaded document."""
from __future__ import annotations

import logging
from typing import AsyncIterator, Optional

from css_order_analyzer.analysis.conflicts import ConflictDetector
from css_order_analyzer.analysis.normalizer import normalize_matched_rules
from css_order_analyzer.engine.base import StyleEngine
from css_order_analyzer.engine.chromium import ChromiumStyleEngine
from css_order_analyzer.engine.registry import StylesheetRegistry
from css_order_analyzer.models.analysis import AnalysisResult
from css_order_analyzer.models.config import AnalyzerConfig
from css_order_analyzer.models.conflict import ConflictGroup, ElementConflict

logger = logging.getLogger(__name__)


async def find_order_dependent_styles(
    engine: StyleEngine,
    node_id: int,
    detector: ConflictDetector,
    config: Optional[AnalyzerConfig] = None,
) -> AsyncIterator[ConflictGroup]:
    """Emit the order-dependent styles applied to one element.

    Each result is a single specificity shared by several selectors that
    set the same property, which makes those selectors order-dependent.

    Args:
        engine: Engine holding the loaded document.
        node_id: Node id of the element.
        detector: Conflict detector to run on the element's styles.
        config: Configuration supplying ignored properties.

    Yields:
        ConflictGroup for every tie found on the element.
    """
    rules = await engine.get_matched_rules(node_id)

    # Stylesheets referenced by these rules must be registered before
    # any report refers to them
    await engine.drain_notifications()
    referenced = [rule.stylesheet_id for rule in rules if rule.stylesheet_id]
    unknown = engine.registry.missing(referenced)
    if unknown:
        logger.debug(
            "Node %d references unregistered stylesheets: %s",
            node_id,
            ", ".join(unknown),
        )

    ignored = config.ignored_properties if config is not None else None
    property_map = normalize_matched_rules(rules, ignored_properties=ignored)
    for group in detector.detect(property_map):
        yield group


async def run_analysis(
    url: str,
    registry: StylesheetRegistry,
    config: Optional[AnalyzerConfig] = None,
    engine: Optional[StyleEngine] = None,
    detector: Optional[ConflictDetector] = None,
) -> AnalysisResult:
    """Load a page and collect every order-dependent style on it.

    Elements are processed one at a time in document order. Any failure
    aborts the whole run; no partial result is returned.

    Args:
        url: URL of the page to analyse.
        registry: Registry receiving the page's stylesheets.
        config: Configuration. Defaults apply if None.
        engine: Style engine. Defaults to a Chromium engine on the registry.
        detector: Conflict detector. Defaults to one using the shared calculator.

    Returns:
        AnalysisResult with conflicts in document order.

    Raises:
        CssOrderAnalyzerError: If the engine fails or a selector is malformed.
    """
    config = config if config is not None else AnalyzerConfig()
    engine = engine if engine is not None else ChromiumStyleEngine(registry, config)
    detector = detector if detector is not None else ConflictDetector()

    conflicts: list[ElementConflict] = []
    elements_scanned = 0
    stopped_early = False

    async with engine:
        await engine.load(url)
        await engine.drain_notifications()
        logger.debug("Loaded %s with %d stylesheets", url, len(registry))

        node_ids = await engine.list_all_elements()
        logger.debug("Scanning %d elements", len(node_ids))

        for position, node_id in enumerate(node_ids):
            elements_scanned += 1
            found = False
            async for group in find_order_dependent_styles(
                engine, node_id, detector, config
            ):
                found = True
                conflicts.append(ElementConflict(node_id=node_id, conflict=group))

            if found and config.fail_fast:
                stopped_early = position < len(node_ids) - 1
                break

    logger.debug(
        "Scanned %d elements, found %d conflicts", elements_scanned, len(conflicts)
    )
    return AnalysisResult(
        url=url,
        elements_scanned=elements_scanned,
        conflicts=conflicts,
        stopped_early=stopped_early,
    )
