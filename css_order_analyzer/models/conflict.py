"""Conflict-related Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from css_order_analyzer.models.style import Selector


class ConflictGroup(BaseModel):
    """Selectors of equal specificity that set the same property on one element.

    The final value of the property depends on declaration order rather
    than on specificity.
    """

    model_config = {"extra": "forbid", "frozen": True}

    property_name: str = Field(description="Property set by every selector")
    specificity: str = Field(description="Shared specificity hash, e.g. 0-0-1-1")
    selectors: list[Selector] = Field(
        min_length=2,
        description="Selectors in discovery order, at least two",
    )


class ElementConflict(BaseModel):
    """A conflict group found on a specific DOM element."""

    model_config = {"extra": "forbid", "frozen": True}

    node_id: int = Field(description="DOM node id of the element")
    conflict: ConflictGroup = Field(description="The conflicting selectors")
