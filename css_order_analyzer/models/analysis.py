"""Analysis run Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from css_order_analyzer.models.conflict import ElementConflict


class Verbosity(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"


class ReportOptions(BaseModel):
    """Options for rendering an analysis report."""

    model_config = {"extra": "forbid"}

    format: Literal["terminal", "markdown", "json"] = Field(
        default="terminal",
        description="Output format for the report",
    )
    verbosity: Verbosity = Field(
        default=Verbosity.NORMAL,
        description="Output verbosity level (quiet, normal, verbose)",
    )


class AnalysisResult(BaseModel):
    """Result of analysing one page."""

    model_config = {"extra": "forbid"}

    url: str = Field(description="URL that was analysed")
    elements_scanned: int = Field(default=0, description="Elements processed")
    conflicts: list[ElementConflict] = Field(
        default_factory=list,
        description="Conflicts in document order",
    )
    stopped_early: bool = Field(
        default=False,
        description="True if the scan stopped at the first conflicting element",
    )

    @property
    def has_conflicts(self) -> bool:
        """Check if any order-dependent styles were found.

        Returns:
            True if at least one conflict was recorded.
        """
        return len(self.conflicts) > 0

    @property
    def conflicting_elements(self) -> int:
        """Number of distinct elements with at least one conflict."""
        return len({item.node_id for item in self.conflicts})
