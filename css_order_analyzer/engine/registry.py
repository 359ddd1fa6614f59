"""Stylesheet identifier to source URL registry."""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from css_order_analyzer.constants import UNKNOWN_SOURCE

logger = logging.getLogger(__name__)


class StylesheetRegistry:
    """Maps stylesheet identifiers to the URL they were loaded from.

    Populated from the engine's stylesheet-added notifications and only
    read when reports are rendered. Entries are never removed for the
    lifetime of one page load.
    """

    def __init__(self) -> None:
        self._urls: dict[str, str] = {}

    def record(self, stylesheet_id: str, source_url: str) -> None:
        """Record the source URL of a stylesheet, replacing any previous entry."""
        if stylesheet_id in self._urls:
            logger.debug("Stylesheet %s re-registered as %s", stylesheet_id, source_url)
        else:
            logger.debug("Stylesheet %s added from %s", stylesheet_id, source_url)
        self._urls[stylesheet_id] = source_url

    def lookup(self, stylesheet_id: str) -> Optional[str]:
        """Get the source URL of a stylesheet, or None if it was never recorded."""
        return self._urls.get(stylesheet_id)

    def source_url(self, stylesheet_id: str) -> str:
        """Get the source URL of a stylesheet for display.

        Args:
            stylesheet_id: Identifier of the stylesheet.

        Returns:
            The recorded URL, or ``UNKNOWN_SOURCE`` when none was recorded
            or the stylesheet has no URL (e.g. an inline ``<style>`` block).
        """
        return self._urls.get(stylesheet_id) or UNKNOWN_SOURCE

    def missing(self, stylesheet_ids: Iterable[str]) -> list[str]:
        """List the given identifiers that have not been recorded yet."""
        return [sid for sid in dict.fromkeys(stylesheet_ids) if sid not in self._urls]

    def as_dict(self) -> dict[str, str]:
        """Snapshot of all recorded stylesheets."""
        return dict(self._urls)

    def __contains__(self, stylesheet_id: object) -> bool:
        return stylesheet_id in self._urls

    def __len__(self) -> int:
        return len(self._urls)
