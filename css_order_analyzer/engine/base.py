"""Base style engine interface."""
from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional

from css_order_analyzer.engine.registry import StylesheetRegistry
from css_order_analyzer.models.style import MatchedRule


class StyleEngine(ABC):
    """Abstract base class for engines that match styles against a page.

    An engine loads a document, enumerates its elements and reports the
    style rules matching each element. Stylesheet-added notifications are
    recorded into the registry given at construction.
    """

    def __init__(self, registry: StylesheetRegistry) -> None:
        self.registry = registry

    async def __aenter__(self) -> StyleEngine:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()

    async def start(self) -> None:
        """Acquire engine resources. The default does nothing."""

    async def close(self) -> None:
        """Release engine resources. The default does nothing."""

    @abstractmethod
    async def load(self, url: str) -> None:
        """Load a document.

        Args:
            url: URL of the page to load.

        Raises:
            CollaboratorUnavailableError: If the page cannot be loaded.
        """

    @abstractmethod
    async def list_all_elements(self) -> list[int]:
        """List every element of the loaded document in document order.

        Returns:
            Node ids of all elements.

        Raises:
            CollaboratorUnavailableError: If the engine call fails.
        """

    @abstractmethod
    async def get_matched_rules(self, node_id: int) -> list[MatchedRule]:
        """Get the style rules matching one element.

        Args:
            node_id: Node id of the element.

        Returns:
            Matched rules of every origin, in cascade order.

        Raises:
            CollaboratorUnavailableError: If the engine call fails.
        """

    async def drain_notifications(self) -> None:
        """Wait until pending stylesheet notifications reach the registry.

        The default does nothing, which suits engines that record
        stylesheets synchronously.
        """
