"""Chromium style engine driven through Playwright and the DevTools protocol."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from playwright.async_api import Browser, CDPSession, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from css_order_analyzer.constants import ALL_ELEMENTS_SELECTOR
from css_order_analyzer.engine.base import StyleEngine
from css_order_analyzer.engine.protocol import (
    parse_matched_rules,
    parse_stylesheet_header,
)
from css_order_analyzer.engine.registry import StylesheetRegistry
from css_order_analyzer.exceptions import CollaboratorUnavailableError
from css_order_analyzer.models.config import AnalyzerConfig
from css_order_analyzer.models.style import MatchedRule

logger = logging.getLogger(__name__)


class ChromiumStyleEngine(StyleEngine):
    """Style engine backed by a headless Chromium page.

    The DOM and CSS protocol domains are enabled before navigation so that
    every ``CSS.styleSheetAdded`` event of the page load is recorded.
    """

    def __init__(
        self,
        registry: StylesheetRegistry,
        config: Optional[AnalyzerConfig] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            registry: Registry receiving stylesheet-added notifications.
            config: Browser and navigation settings. Defaults apply if None.
        """
        super().__init__(registry)
        self._config = config if config is not None else AnalyzerConfig()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None
        self._session: Optional[CDPSession] = None

    async def start(self) -> None:
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self._config.headless
            )
            self._page = await self._browser.new_page()
            self._session = await self._page.context.new_cdp_session(self._page)
            self._session.on("CSS.styleSheetAdded", self._on_stylesheet_added)

            # Domains must be enabled before they emit events or answer calls
            await self._session.send("DOM.enable")
            await self._session.send("CSS.enable")
        except PlaywrightError as e:
            await self.close()
            raise CollaboratorUnavailableError(f"Cannot start Chromium: {e}") from e

    async def close(self) -> None:
        try:
            if self._browser is not None:
                await self._browser.close()
            if self._playwright is not None:
                await self._playwright.stop()
        except PlaywrightError as e:
            logger.warning("Error while closing Chromium: %s", e)
        finally:
            self._session = None
            self._page = None
            self._browser = None
            self._playwright = None

    async def load(self, url: str) -> None:
        page = self._require_page()
        logger.debug("Loading %s (wait until %s)", url, self._config.wait_until)
        try:
            await page.goto(
                url,
                wait_until=self._config.wait_until,
                timeout=self._config.timeout_ms,
            )
        except PlaywrightError as e:
            raise CollaboratorUnavailableError(f"Cannot load '{url}': {e}") from e

    async def list_all_elements(self) -> list[int]:
        document = await self._send("DOM.getDocument")
        result = await self._send(
            "DOM.querySelectorAll",
            {
                "nodeId": document["root"]["nodeId"],
                "selector": ALL_ELEMENTS_SELECTOR,
            },
        )
        node_ids = list(result.get("nodeIds", []))
        logger.debug("Found %d elements", len(node_ids))
        return node_ids

    async def get_matched_rules(self, node_id: int) -> list[MatchedRule]:
        payload = await self._send("CSS.getMatchedStylesForNode", {"nodeId": node_id})
        return parse_matched_rules(payload)

    async def drain_notifications(self) -> None:
        # Events are dispatched in arrival order ahead of later responses;
        # yielding once lets queued handlers run.
        await asyncio.sleep(0)

    def _on_stylesheet_added(self, params: dict[str, Any]) -> None:
        stylesheet_id, source_url = parse_stylesheet_header(params)
        self.registry.record(stylesheet_id, source_url)

    def _require_page(self) -> Page:
        if self._page is None:
            raise CollaboratorUnavailableError("Chromium engine is not started")
        return self._page

    def _require_session(self) -> CDPSession:
        if self._session is None:
            raise CollaboratorUnavailableError("Chromium engine is not started")
        return self._session

    async def _send(
        self, method: str, params: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """Send a protocol command, wrapping failures.

        Args:
            method: Protocol method name.
            params: Command parameters.

        Returns:
            Decoded response.

        Raises:
            CollaboratorUnavailableError: If the command fails.
        """
        session = self._require_session()
        try:
            return await session.send(method, params)
        except PlaywrightError as e:
            raise CollaboratorUnavailableError(f"{method} failed: {e}") from e
